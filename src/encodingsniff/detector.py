"""EncodingDetector: stream orchestration around a statistical engine."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import BinaryIO, Protocol

from chardet import UniversalDetector

from encodingsniff._utils import DEFAULT_CHUNK_SIZE, _validate_positive
from encodingsniff.equivalences import CharsetNameResolver, UnknownCharsetError


class CharsetEngine(Protocol):
    """Capability contract of a statistical charset-detection engine.

    ``chardet.UniversalDetector`` satisfies it as-is.
    """

    @property
    def done(self) -> bool:
        """Whether the engine has settled on an answer it will not change."""
        ...

    def feed(self, byte_str: bytes) -> None: ...

    def close(self) -> Mapping[str, object]:
        """Signal end of input and return the result.

        The ``"encoding"`` key holds the best guess, or ``None``.
        """
        ...


def default_engine() -> CharsetEngine:
    """Build a chardet engine that reports names as detected.

    Legacy renaming is disabled so that, e.g., ASCII input is reported as
    ``ascii`` rather than its Windows-1252 superset.
    """
    return UniversalDetector(should_rename_legacy=False)


class EncodingDetector:
    """Detect the encoding of a byte stream.

    Each :meth:`detect` call builds its own engine from *engine_factory*, so
    one detector may serve many streams, including from several threads.
    """

    def __init__(
        self,
        engine_factory: Callable[[], CharsetEngine] | None = None,
        resolver: CharsetNameResolver | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        """Initialize the detector.

        :param engine_factory: Zero-argument callable returning a fresh
            :class:`CharsetEngine`.  Defaults to :func:`default_engine`.
        :param resolver: Resolver used to canonicalize the engine's guess.
        :param chunk_size: Number of bytes read from the stream per chunk.
        """
        _validate_positive("chunk_size", chunk_size)
        self.engine_factory = engine_factory or default_engine
        self.resolver = resolver if resolver is not None else CharsetNameResolver()
        self.chunk_size = chunk_size
        self.logger = logging.getLogger(__name__)

    def detect(self, stream: BinaryIO) -> str | None:
        """Return the canonical name of the stream's encoding, or ``None``.

        *stream* is consumed and closed on every exit path.  Errors raised
        while reading propagate unchanged.
        """
        try:
            guess = self._feed_engine(stream)
        finally:
            stream.close()

        if guess is None:
            return None
        try:
            encoding = self.resolver.canonicalize(guess)
        except UnknownCharsetError:
            self.logger.warning("engine guessed unknown charset %r", guess)
            return None

        fixed = self.resolver.apply_alias_fixup(encoding)
        if fixed != encoding:
            self.logger.debug("renamed %s to %s", encoding, fixed)
        return fixed

    def _feed_engine(self, stream: BinaryIO) -> str | None:
        """Feed *stream* to a fresh engine and return its raw guess."""
        engine = self.engine_factory()
        n_chunks = 0
        n_bytes = 0
        while not engine.done:
            chunk = stream.read(self.chunk_size)
            if not chunk:
                break
            engine.feed(chunk)
            n_chunks += 1
            n_bytes += len(chunk)
        else:
            self.logger.debug("engine done after %d chunk(s)", n_chunks)

        result = engine.close()
        # An empty stream carries no evidence, whatever the engine's fallback.
        if n_bytes == 0:
            return None
        guess = result.get("encoding")
        self.logger.debug("engine guess %r from %d byte(s)", guess, n_bytes)
        return guess if isinstance(guess, str) else None
