from __future__ import annotations


class SamplingError(Exception):
    """Base class for sampling failures that are not I/O errors."""


class SampleSizeError(SamplingError, ValueError):
    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Requested sample size ({requested} bytes) is larger than the corpus "
            f"({available} bytes)."
        )


class EmptySelectionError(SamplingError, ValueError):
    pass
