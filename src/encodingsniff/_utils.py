"""Internal shared utilities for encodingsniff."""

from __future__ import annotations

#: Number of bytes handed to the statistical engine per read.
DEFAULT_CHUNK_SIZE: int = 4096

#: Number of decoded characters sampled for line-ending classification.
DEFAULT_SAMPLE_CHARS: int = 4096


def _validate_positive(name: str, value: int) -> None:
    """Raise ValueError if *value* is not a positive integer."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = f"{name} must be a positive integer"
        raise ValueError(msg)
