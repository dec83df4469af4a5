"""I/O utilities for loading texts to transform."""

from __future__ import annotations

from pathlib import Path

import pandas as pd


def load_csv(path: str | Path, text_col: str = "text", id_col: str = "doc_id") -> pd.DataFrame:
    """Load texts from a CSV file.

    Returns a frame with ``doc_id`` and ``text`` columns. Ids come from
    ``id_col`` when present, otherwise they are generated.
    """
    csv_path = Path(path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    if text_col not in df.columns:
        raise ValueError(f"Missing text column '{text_col}' in {csv_path}")

    out = pd.DataFrame()
    if id_col in df.columns:
        out["doc_id"] = df[id_col].astype(str)
    else:
        out["doc_id"] = [f"doc_{idx:04d}" for idx in range(1, len(df) + 1)]
    out["text"] = df[text_col].astype(str)
    return out


def load_txt_folder(folder: str | Path) -> pd.DataFrame:
    """Load a folder of .txt files into a DataFrame.

    Each file becomes a row with doc_id (stem) and text.
    """
    folder_path = Path(folder)
    if not folder_path.exists():
        raise FileNotFoundError(f"Folder not found: {folder_path}")

    rows: list[dict[str, str]] = []
    for txt_file in sorted(folder_path.glob("*.txt")):
        rows.append(
            {
                "doc_id": txt_file.stem,
                "text": txt_file.read_text(encoding="utf-8"),
            }
        )

    if not rows:
        raise ValueError(f"No .txt files found in {folder_path}")

    return pd.DataFrame(rows, columns=["doc_id", "text"])
