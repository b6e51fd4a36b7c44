"""Encoding and line-ending detection for byte streams of unknown origin."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

from encodingsniff.detector import CharsetEngine, EncodingDetector, default_engine
from encodingsniff.enums import CharsetFamily, LineEnding
from encodingsniff.equivalences import (
    CharsetNameResolver,
    CharsetRegistry,
    CodecsRegistry,
    UnknownCharsetError,
)
from encodingsniff.families import charset_family
from encodingsniff.line_endings import LineEndingClassifier, classify_text

__version__ = "1.0.0"
__all__ = [
    "CharsetEngine",
    "CharsetFamily",
    "CharsetNameResolver",
    "CharsetRegistry",
    "CodecsRegistry",
    "EncodingDetector",
    "LineEnding",
    "LineEndingClassifier",
    "UnknownCharsetError",
    "are_equivalent",
    "charset_family",
    "classify_text",
    "default_engine",
    "detect",
    "detect_file",
    "line_ending",
    "line_ending_file",
]


def are_equivalent(a: str | None, b: str | None) -> bool:
    """Check whether two charset names denote the same charset."""
    return CharsetNameResolver().are_equivalent(a, b)


def detect(stream: BinaryIO) -> str | None:
    """Detect the encoding of *stream* with the default chardet engine.

    *stream* is closed before returning.
    """
    return EncodingDetector().detect(stream)


def line_ending(stream: BinaryIO, encoding: str) -> LineEnding:
    """Classify the line endings of *stream* decoded as *encoding*.

    *stream* is closed before returning.
    """
    return LineEndingClassifier().classify(stream, encoding)


def detect_file(path: str | Path) -> str | None:
    """Detect the encoding of the file at *path*."""
    return detect(Path(path).open("rb"))


def line_ending_file(path: str | Path, encoding: str | None = None) -> LineEnding:
    """Classify the line endings of the file at *path*.

    When *encoding* is omitted it is detected first; a file whose encoding
    cannot be determined is sampled as ASCII-compatible ``latin-1``, which
    decodes any byte and preserves CR and LF.
    """
    if encoding is None:
        encoding = detect_file(path) or "latin-1"
    return line_ending(Path(path).open("rb"), encoding)
