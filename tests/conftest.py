"""Shared test fixtures and doubles."""

from __future__ import annotations

import io

import pytest


class TrackingStream(io.BytesIO):
    """In-memory byte stream that records how it was read and closed.

    :param fail_after: Raise ``OSError`` on the read following this many
        successful reads.
    :param close_error: Exception raised (once per call) from :meth:`close`.
    """

    def __init__(
        self,
        data: bytes = b"",
        fail_after: int | None = None,
        close_error: Exception | None = None,
    ) -> None:
        super().__init__(data)
        self.close_calls = 0
        self.reads = 0
        self.fail_after = fail_after
        self.close_error = close_error

    def read(self, size: int | None = -1) -> bytes:
        if self.fail_after is not None and self.reads >= self.fail_after:
            msg = "simulated read failure"
            raise OSError(msg)
        self.reads += 1
        return super().read(size)

    def close(self) -> None:
        self.close_calls += 1
        super().close()
        if self.close_error is not None:
            raise self.close_error


class FakeEngine:
    """Engine double reporting a fixed guess.

    Reports ``done`` once *done_after* chunks have been fed.
    """

    def __init__(self, guess: str | None = None, done_after: int | None = None):
        self.guess = guess
        self.done_after = done_after
        self.chunks: list[bytes] = []
        self.closed = False

    @property
    def done(self) -> bool:
        return self.done_after is not None and len(self.chunks) >= self.done_after

    def feed(self, byte_str: bytes) -> None:
        if self.done:
            msg = "fed after done"
            raise AssertionError(msg)
        self.chunks.append(bytes(byte_str))

    def close(self) -> dict[str, str | float | None]:
        self.closed = True
        return {"encoding": self.guess, "confidence": 1.0, "language": None}


class FakeRegistry:
    """Registry double with a fixed alias table."""

    def __init__(self, names: dict[str, str]) -> None:
        self.names = {k.lower(): v for k, v in names.items()}

    def canonical_name(self, name: str) -> str:
        try:
            return self.names[name.lower()]
        except KeyError:
            raise LookupError(name) from None


@pytest.fixture
def make_stream():
    return TrackingStream


@pytest.fixture
def make_engine():
    """Return a factory building :class:`FakeEngine` instances.

    Every engine built is recorded in ``factory.engines``.
    """

    def factory(guess: str | None = None, done_after: int | None = None):
        def build() -> FakeEngine:
            engine = FakeEngine(guess, done_after)
            build.engines.append(engine)
            return engine

        build.engines = []
        return build

    return factory


@pytest.fixture
def make_registry():
    return FakeRegistry


@pytest.fixture
def fake_registry() -> FakeRegistry:
    return FakeRegistry(
        {
            "UTF-8": "UTF-8",
            "utf8": "UTF-8",
            "Shift_JIS": "Shift_JIS",
            "shift-jis": "Shift_JIS",
            "sjis": "Shift_JIS",
            "MS932": "windows-31j",
            "windows-31j": "windows-31j",
            "US-ASCII": "US-ASCII",
            "ascii": "US-ASCII",
        }
    )
