from __future__ import annotations

import csv
import json
from pathlib import Path

FIELDNAMES = [
    "language",
    "kind",
    "seed",
    "size_mb",
    "budget_bytes",
    "corpus_bytes",
    "records_indexed",
    "records_selected",
    "records_written",
    "selected_bytes",
    "bytes_written",
    "fill_ratio",
    "sample_path",
    "source_path",
    "sample_sha256",
    "updated_at_utc",
]


def _read_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def build_rows(samples_root: Path) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for metadata_path in sorted(samples_root.glob("*/*.meta.json")):
        meta = _read_json(metadata_path)
        budget = meta.get("budget_bytes")
        bytes_written = meta.get("bytes_written")
        fill_ratio = None
        if isinstance(budget, int) and budget > 0 and isinstance(bytes_written, int):
            fill_ratio = bytes_written / budget

        rows.append(
            {
                "language": meta.get("language_code"),
                "kind": meta.get("kind"),
                "seed": meta.get("seed"),
                "size_mb": meta.get("size_mb"),
                "budget_bytes": budget,
                "corpus_bytes": meta.get("corpus_bytes"),
                "records_indexed": meta.get("records_indexed"),
                "records_selected": meta.get("records_selected"),
                "records_written": meta.get("records_written"),
                "selected_bytes": meta.get("selected_bytes"),
                "bytes_written": bytes_written,
                "fill_ratio": fill_ratio,
                "sample_path": meta.get("sample_path"),
                "source_path": meta.get("source_path"),
                "sample_sha256": meta.get("sample_sha256"),
                "updated_at_utc": meta.get("updated_at_utc"),
            }
        )
    return rows


def write_csv(rows: list[dict[str, object]], out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerows(rows)
