"""Typer CLI entrypoint for reverse-words."""

from __future__ import annotations

from pathlib import Path
import random
import sys

import pandas as pd
import typer
from rich import print

from reverse_words.batch import run_batch
from reverse_words.reverse import Mode, reverse_lettering, reverse_words_order

app = typer.Typer(add_completion=False, no_args_is_help=True)

PHRASES = [
    "hello world",
    "My name is PowerMilk",
    "This is test for reverse words function",
    "Litwo! Ojczyzno moja! Ty jesteś jak zdrowie,",
    "¡Hola! ¿Qué tal?",
    "你好 世界",
    "The quick brown fox jumps over the lazy dog.",
    "Wait... what (exactly) did you mean?",
    "Tabs\tand\nnewlines   collapse",
    "e-mail: someone@example.com",
]


def _make_phrase() -> str:
    first, second = random.sample(PHRASES, k=2)
    if random.random() < 0.3:
        return f"{first} {second}"
    return first


def _generate_docs(count: int = 40) -> pd.DataFrame:
    rows: list[dict[str, str]] = []
    for item_id in range(1, count + 1):
        rows.append(
            {
                "item_id": f"item_{item_id:03d}",
                "text": _make_phrase(),
            }
        )
    return pd.DataFrame(rows, columns=["item_id", "text"])


def _read_text(words: list[str] | None) -> str:
    if words:
        return " ".join(words)
    return sys.stdin.read()


@app.command("lettering")
def lettering(
    words: list[str] | None = typer.Argument(None, help="Text to transform; reads stdin if omitted."),
) -> None:
    """Reverse the letters of each word."""
    typer.echo(reverse_lettering(_read_text(words)))


@app.command("order")
def order(
    words: list[str] | None = typer.Argument(None, help="Text to transform; reads stdin if omitted."),
) -> None:
    """Reverse the order of words."""
    typer.echo(reverse_words_order(_read_text(words)))


@app.command("batch")
def batch(
    input_path: Path | None = typer.Option(
        None,
        "--input",
        "-i",
        help="Input CSV file path.",
    ),
    input_folder: Path | None = typer.Option(
        None,
        "--input-folder",
        help="Input folder containing .txt files.",
    ),
    mode: Mode = typer.Option(Mode.LETTERING, "--mode", "-m", help="Reversal mode."),
    text_col: str = typer.Option("text", "--text-col", help="Text column in CSV."),
    id_col: str = typer.Option("doc_id", "--id-col", help="Document id column in CSV."),
    out_dir: Path = typer.Option(Path("outputs/reversed"), "--out", "-o", help="Output folder."),
) -> None:
    """Reverse every text of a CSV or .txt folder and write outputs."""
    if input_path and input_folder:
        raise typer.BadParameter("Use either --input or --input-folder, not both.")
    if not input_path and not input_folder:
        raise typer.BadParameter("Provide --input CSV path or --input-folder.")

    run_batch(
        input_path=input_path,
        input_folder=input_folder,
        out_dir=out_dir,
        mode=mode,
        text_col=text_col,
        id_col=id_col,
    )


@app.command("sample-data")
def sample_data(
    output: Path = typer.Option(
        Path("data/sample_phrases.csv"),
        "--output",
        "-o",
        help="Output CSV path.",
    ),
    count: int = typer.Option(40, "--count", help="Number of phrases to generate."),
) -> None:
    """Generate a synthetic sample dataset."""
    if count < 1:
        raise typer.BadParameter("--count must be at least 1.")
    output.parent.mkdir(parents=True, exist_ok=True)

    if output.exists():
        print(f"[yellow]Sample data already exists:[/] {output}")
        return

    df = _generate_docs(count=count)
    df.to_csv(output, index=False)
    print(f"[green]Wrote[/] {len(df)} phrases to {output}")


if __name__ == "__main__":
    app()
