"""Batch pipeline: reverse every text of a CSV or .txt folder."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import json

import pandas as pd
from rich.console import Console

from reverse_words.io_utils import load_csv, load_txt_folder
from reverse_words.reverse import Mode, transform
from reverse_words.tokenizer import tokenize


console = Console()


@dataclass
class BatchResults:
    reversed_docs: pd.DataFrame
    metrics: dict


def load_documents(
    input_path: Path | None,
    input_folder: Path | None,
    text_col: str = "text",
    id_col: str = "doc_id",
) -> pd.DataFrame:
    """Load documents from a CSV or folder of .txt files."""
    if input_path and input_folder:
        raise ValueError("Use either --input or --input-folder, not both.")
    if not input_path and not input_folder:
        raise ValueError("Provide --input CSV path or --input-folder with .txt files.")

    if input_folder:
        return load_txt_folder(input_folder)
    return load_csv(input_path, text_col=text_col, id_col=id_col)


def _count_tokens(text: str) -> int:
    return sum(1 for token in tokenize(text) if token)


def run_batch(
    input_path: Path | None,
    input_folder: Path | None,
    out_dir: Path,
    mode: Mode = Mode.LETTERING,
    text_col: str = "text",
    id_col: str = "doc_id",
) -> BatchResults:
    """Reverse every loaded text and write outputs."""
    console.print("[bold]Loading documents...[/bold]")
    df = load_documents(
        input_path=input_path,
        input_folder=input_folder,
        text_col=text_col,
        id_col=id_col,
    )

    texts = df["text"].tolist()
    console.print(f"[bold]Reversing {len(texts)} texts ({mode.value})...[/bold]")
    df_out = df[["doc_id", "text"]].copy()
    df_out["reversed"] = [transform(text, mode) for text in texts]

    metrics = {
        "mode": mode.value,
        "n_docs": int(len(df_out)),
        "n_empty": int((df_out["reversed"] == "").sum()),
        "n_tokens": int(sum(_count_tokens(text) for text in texts)),
    }

    results = BatchResults(reversed_docs=df_out, metrics=metrics)
    write_outputs(results, out_dir)
    return results


def write_outputs(results: BatchResults, out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)

    docs_path = out_dir / "reversed_texts.csv"
    summary_path = out_dir / "summary.json"
    report_path = out_dir / "report.md"

    results.reversed_docs.to_csv(docs_path, index=False)
    summary_path.write_text(json.dumps(results.metrics, indent=2), encoding="utf-8")

    report_lines = [
        "# Reversal Report",
        "",
        f"- Mode: {results.metrics['mode']}",
        f"- Documents: {results.metrics['n_docs']}",
        f"- Empty results: {results.metrics['n_empty']}",
        f"- Tokens: {results.metrics['n_tokens']}",
        "",
        "## Samples",
        "",
        "| doc_id | text | reversed |",
        "| --- | --- | --- |",
    ]
    for row in results.reversed_docs.head(10).itertuples(index=False):
        report_lines.append(
            f"| {row.doc_id} | {_table_cell(row.text)} | {_table_cell(row.reversed)} |"
        )

    report_path.write_text("\n".join(report_lines), encoding="utf-8")

    console.print(f"[green]Wrote outputs to[/] {out_dir}")


def _table_cell(text: str) -> str:
    return " ".join(text.split()).replace("|", "\\|")
