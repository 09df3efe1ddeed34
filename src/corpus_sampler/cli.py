from pathlib import Path
import random

import typer

from .sampling.errors import SamplingError
from .sampling.sampler import SamplingKind

app = typer.Typer(help="Random, size-bounded sampling of line-delimited corpora")


@app.command("sample")
def sample_command(
    source: Path = typer.Argument(..., help="Corpus source file."),
    destination: Path = typer.Argument(..., help="Corpus destination file. Should not exist."),
    size: float = typer.Argument(..., help="Size of the sample, in MB (10^6 bytes)."),
    in_bytes: bool = typer.Option(
        False, "--bytes", help="Interpret SIZE as a number of bytes instead of MB"
    ),
    kind: SamplingKind = typer.Option(
        SamplingKind.WITH_REPLACEMENT, "--kind", "-k", help="Sampling policy"
    ),
    seed: int | None = typer.Option(None, "--seed", help="Random seed for reproducible samples"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Overwrite the destination if it exists"
    ),
) -> None:
    from .data.paths import mb_to_bytes
    from .data.sample import sample_corpus

    if size < 0:
        raise typer.BadParameter("SIZE must be >= 0.", param_hint="SIZE")
    if in_bytes and not size.is_integer():
        raise typer.BadParameter("SIZE must be a whole number of bytes.", param_hint="SIZE")
    budget = int(size) if in_bytes else mb_to_bytes(size)

    try:
        stats = sample_corpus(
            source=source,
            destination=destination,
            budget=budget,
            kind=kind,
            rng=random.Random(seed),
            overwrite=force,
        )
    except SamplingError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(
        f"Wrote {stats.records_written} records ({stats.bytes_written} bytes) to '{destination}'."
    )


@app.command("run")
def run_command(
    config: Path = typer.Option(..., "--config", "-c", help="Path to sampling YAML config"),
    force: bool = typer.Option(False, "--force", "-f", help="Force resampling even if outputs exist"),
) -> None:
    from .data.sample import run_sample

    try:
        run_sample(config_path=config, force=force)
    except SamplingError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("index")
def index_command(
    source: Path = typer.Argument(..., help="Corpus file to index."),
) -> None:
    from .data.sample import index_corpus
    from .sampling.sampler import describe_index

    summary = describe_index(index_corpus(source))
    typer.echo(f"records: {summary.records}")
    typer.echo(f"total_bytes: {summary.total_bytes}")
    typer.echo(f"min_length: {summary.min_length}")
    typer.echo(f"max_length: {summary.max_length}")
    typer.echo(f"mean_length: {summary.mean_length:.2f}")


@app.command("report")
def report_command(
    samples_root: Path = typer.Option(
        Path("data/samples"),
        "--samples-root",
        help="Root directory containing <lang>/<sample>.meta.json files",
    ),
    out: Path = typer.Option(
        Path("analysis/samples_table.csv"), "--out", help="CSV file to write"
    ),
) -> None:
    from .data.report import build_rows, write_csv

    rows = build_rows(samples_root)
    write_csv(rows, out)
    typer.echo(f"Wrote {len(rows)} rows to {out}")


def main() -> None:
    app()
