from __future__ import annotations

from pathlib import Path

BYTES_PER_MB = 10**6


def mb_to_bytes(size_mb: float) -> int:
    return round(size_mb * BYTES_PER_MB)


def _size_token(size_mb: float) -> str:
    if float(size_mb).is_integer():
        return str(int(size_mb))
    return str(size_mb).replace(".", "p")


def sample_filename(language: str, size_mb: float) -> str:
    return f"{language}_sample_{_size_token(size_mb)}mb.txt"


def sample_metadata_path(sample_path: Path) -> Path:
    return sample_path.with_name(f"{sample_path.name}.meta.json")


def sample_paths(output_dir: Path, language: str, size_mb: float) -> tuple[Path, Path]:
    sample = output_dir / language / sample_filename(language, size_mb)
    return sample, sample_metadata_path(sample)


def resolve_input_corpus_path(input_dir: Path, language: str) -> Path:
    expected = input_dir / f"{language}.txt"
    if expected.exists():
        return expected

    # Per-language directory layout: <input_dir>/<lang>/<lang>.txt
    nested = input_dir / language / f"{language}.txt"
    if nested.exists():
        return nested

    raise FileNotFoundError(
        f"Missing corpus for '{language}': expected '{expected}' (or '{nested}')."
    )
