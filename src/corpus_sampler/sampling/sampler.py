from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from .errors import EmptySelectionError


class SamplingKind(str, Enum):
    WITH_REPLACEMENT = "with-replacement"
    WITHOUT_REPLACEMENT = "without-replacement"


@dataclass(frozen=True)
class IndexSummary:
    records: int
    total_bytes: int
    min_length: int
    max_length: int
    mean_length: float


def describe_index(index: dict[int, int]) -> IndexSummary:
    if not index:
        return IndexSummary(records=0, total_bytes=0, min_length=0, max_length=0, mean_length=0.0)
    lengths = index.values()
    total = sum(lengths)
    return IndexSummary(
        records=len(index),
        total_bytes=total,
        min_length=min(lengths),
        max_length=max(lengths),
        mean_length=total / len(index),
    )


def selection_size(index: dict[int, int], selection: list[int]) -> int:
    return sum(index[offset] for offset in selection)


def _require_documents(index: dict[int, int]) -> None:
    if not index:
        raise EmptySelectionError("No document to sample from: the index is empty.")


def sample_with_replacement(
    index: dict[int, int], budget: int, rng: random.Random
) -> list[int]:
    """Draw offsets independently until the next draw would overflow ``budget``.

    Records longer than the budget can never be drawn, so they are removed
    before drawing instead of being redrawn forever. The draw that would
    overflow is discarded and ends sampling; the accepted total is at most
    ``budget``. Repeated draws are collapsed in the returned, sorted offsets.
    """
    _require_documents(index)
    # zero-length records never move the total and would keep the loop alive
    eligible = [offset for offset, length in index.items() if 0 < length <= budget]
    if not eligible:
        raise EmptySelectionError(
            f"No document fits in the sample size: every record is larger than {budget} bytes."
        )

    total = 0
    drawn: list[int] = []
    while True:
        offset = rng.choice(eligible)
        length = index[offset]
        if total + length > budget:
            break
        drawn.append(offset)
        total += length

    selection = sorted(set(drawn))
    if not selection:
        raise EmptySelectionError("No sample was selected.")
    return selection


def sample_without_replacement(
    index: dict[int, int], budget: int, rng: random.Random
) -> list[int]:
    """Walk one random permutation of the offsets, keeping records while they fit.

    A record longer than the whole budget is skipped. Otherwise the record is
    kept only if the running total stays strictly below ``budget``; the first
    record that does not fit stops the walk.
    """
    _require_documents(index)
    offsets = list(index)
    rng.shuffle(offsets)

    total = 0
    selection: list[int] = []
    for offset in offsets:
        length = index[offset]
        if length > budget:
            continue
        if total + length < budget:
            selection.append(offset)
            total += length
        else:
            break

    if not selection:
        raise EmptySelectionError(
            f"No sample was selected: no record fits strictly under {budget} bytes."
        )
    selection.sort()
    return selection


def sample_offsets(
    index: dict[int, int],
    budget: int,
    kind: SamplingKind,
    rng: random.Random | None = None,
) -> list[int]:
    if budget < 0:
        raise ValueError(f"Sample size must be >= 0, got {budget}.")
    rng = rng if rng is not None else random.Random()
    if kind == SamplingKind.WITH_REPLACEMENT:
        return sample_with_replacement(index, budget, rng)
    if kind == SamplingKind.WITHOUT_REPLACEMENT:
        return sample_without_replacement(index, budget, rng)
    raise ValueError(f"Unknown sampling kind: {kind!r}")
