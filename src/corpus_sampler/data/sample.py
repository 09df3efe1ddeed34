from __future__ import annotations

import hashlib
import json
import random
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path

import typer

from ..config import SampleConfig, load_config
from ..sampling.errors import SampleSizeError
from ..sampling.indexer import build_index
from ..sampling.reader import IndexedReader
from ..sampling.sampler import SamplingKind, sample_offsets, selection_size
from .paths import mb_to_bytes, resolve_input_corpus_path, sample_paths


@dataclass(frozen=True)
class SampleStats:
    corpus_bytes: int
    budget_bytes: int
    records_indexed: int
    records_selected: int
    records_written: int
    selected_bytes: int
    bytes_written: int


def _sha256_for_file(path: Path) -> str:
    digest = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(1024 * 1024), b""):
            digest.update(chunk)
    return digest.hexdigest()


def index_corpus(source: Path) -> dict[int, int]:
    with source.open("rb") as corpus:
        return build_index(corpus)


def sample_corpus(
    source: Path,
    destination: Path,
    budget: int,
    kind: SamplingKind,
    rng: random.Random | None = None,
    overwrite: bool = False,
) -> SampleStats:
    """Write a random subset of ``source`` lines, at most ``budget`` bytes, to ``destination``.

    Lines keep their original order and terminators. ``destination`` must not
    exist yet unless ``overwrite`` is set; an existing file is only replaced
    once a non-empty selection has been made. The corpus is never loaded
    whole: only the offset/length index is kept in memory.
    """
    corpus_bytes = source.stat().st_size
    if budget > corpus_bytes:
        raise SampleSizeError(requested=budget, available=corpus_bytes)
    if destination.exists() and not overwrite:
        raise FileExistsError(f"Destination already exists: {destination}")

    typer.echo(f"Indexing corpus '{source}'...")
    index = index_corpus(source)

    typer.echo(f"Sampling {kind.value} from {len(index)} records (budget={budget} bytes)...")
    selection = sample_offsets(index, budget, kind, rng=rng)
    selected_bytes = selection_size(index, selection)

    typer.echo(f"Writing {len(selection)} records to '{destination}'...")
    destination.parent.mkdir(parents=True, exist_ok=True)
    records_written = 0
    bytes_written = 0
    mode = "wb" if overwrite else "xb"
    with source.open("rb") as corpus, destination.open(mode) as out:
        for line in IndexedReader(corpus, selection):
            out.write(line)
            records_written += 1
            bytes_written += len(line)

    return SampleStats(
        corpus_bytes=corpus_bytes,
        budget_bytes=budget,
        records_indexed=len(index),
        records_selected=len(selection),
        records_written=records_written,
        selected_bytes=selected_bytes,
        bytes_written=bytes_written,
    )


def _write_metadata(
    metadata_path: Path,
    language: str,
    source: Path,
    destination: Path,
    sample_cfg: SampleConfig,
    stats: SampleStats,
) -> None:
    now = datetime.now(UTC).isoformat()
    metadata = {
        "language_code": language,
        "source_path": str(source),
        "sample_path": str(destination),
        "kind": sample_cfg.kind.value,
        "seed": sample_cfg.seed,
        "size_mb": sample_cfg.size_mb,
        **asdict(stats),
        "sample_sha256": _sha256_for_file(destination),
        "created_at_utc": now,
        "updated_at_utc": now,
    }
    with metadata_path.open("w", encoding="utf-8") as f:
        json.dump(metadata, f, indent=2, ensure_ascii=False)
        f.write("\n")


def _sample_language(
    language: str,
    source: Path,
    destination: Path,
    metadata_path: Path,
    sample_cfg: SampleConfig,
    force: bool,
) -> SampleStats | None:
    if destination.exists() and not force:
        typer.echo(
            f"Sample already exists at '{destination}'. Skipping (use --force to rebuild)."
        )
        return None

    rng = random.Random(sample_cfg.seed)
    stats = sample_corpus(
        source=source,
        destination=destination,
        budget=mb_to_bytes(sample_cfg.size_mb),
        kind=sample_cfg.kind,
        rng=rng,
        overwrite=force,
    )
    typer.echo(
        f"Wrote sample: {destination} "
        f"({stats.records_written}/{stats.records_indexed} records, {stats.bytes_written} bytes)"
    )

    if sample_cfg.write_metadata:
        _write_metadata(metadata_path, language, source, destination, sample_cfg, stats)
        typer.echo(f"Wrote metadata: {metadata_path}")
    elif metadata_path.exists():
        # sidecar of the replaced sample
        metadata_path.unlink()
        typer.echo(f"Removed stale metadata: {metadata_path}")
    return stats


def run_sample(config_path: Path, force: bool = False) -> dict[str, SampleStats | None]:
    cfg = load_config(config_path)
    effective_force = force or cfg.force

    results: dict[str, SampleStats | None] = {}
    for language in cfg.languages:
        source = resolve_input_corpus_path(cfg.input_dir, language)
        destination, metadata_path = sample_paths(cfg.output_dir, language, cfg.sample.size_mb)
        results[language] = _sample_language(
            language=language,
            source=source,
            destination=destination,
            metadata_path=metadata_path,
            sample_cfg=cfg.sample,
            force=effective_force,
        )
    return results
