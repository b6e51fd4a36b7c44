"""LineEndingClassifier: dominant line terminator of a text prefix."""

from __future__ import annotations

import codecs
import logging
from typing import BinaryIO

from encodingsniff._utils import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_SAMPLE_CHARS,
    _validate_positive,
)
from encodingsniff.enums import LineEnding

# (crlf, cr, lf) -> result; every other combination is MIXED.
_DECISIONS: dict[tuple[bool, bool, bool], LineEnding] = {
    (True, False, False): LineEnding.CRLF,
    (False, True, False): LineEnding.CR,
    (False, False, True): LineEnding.LF,
    (False, False, False): LineEnding.NONE,
}


def classify_text(text: str) -> LineEnding:
    """Classify the line terminators found in *text*.

    CRLF pairs are removed before looking for bare CR and LF, so a file
    written with CRLF throughout is not mistaken for a mixture.  The policy
    is strict: one stray bare terminator among any number of CRLF pairs
    makes the text MIXED.
    """
    crlf = "\r\n" in text
    if crlf:
        text = text.replace("\r\n", "")
    cr = "\r" in text
    lf = "\n" in text
    return _DECISIONS.get((crlf, cr, lf), LineEnding.MIXED)


class LineEndingClassifier:
    """Classify the line endings of a byte stream in a known encoding.

    Only a bounded prefix of the decoded text is examined.
    """

    def __init__(
        self,
        sample_chars: int = DEFAULT_SAMPLE_CHARS,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        _validate_positive("sample_chars", sample_chars)
        _validate_positive("chunk_size", chunk_size)
        self.sample_chars = sample_chars
        self.chunk_size = chunk_size
        self.logger = logging.getLogger(__name__)

    def classify(self, stream: BinaryIO, encoding: str) -> LineEnding:
        """Return the line ending style of *stream* decoded as *encoding*.

        *stream* is consumed and closed on every exit path.

        :raises LookupError: If *encoding* is unknown.
        :raises UnicodeDecodeError: If the sampled bytes are invalid in
            *encoding*.
        """
        try:
            sample = self._read_sample(stream, encoding)
        finally:
            stream.close()
        result = classify_text(sample)
        self.logger.debug(
            "%s line endings in %d sampled char(s)", result.value, len(sample)
        )
        return result

    def _read_sample(self, stream: BinaryIO, encoding: str) -> str:
        """Decode at most ``sample_chars`` characters from *stream*.

        One character past the cap is decoded when available, to tell a CRLF
        pair cut by the cap from a bare CR.
        """
        decoder = codecs.getincrementaldecoder(encoding)(errors="strict")
        parts: list[str] = []
        n_chars = 0
        while n_chars <= self.sample_chars:
            chunk = stream.read(self.chunk_size)
            if not chunk:
                parts.append(decoder.decode(b"", final=True))
                break
            try:
                text = decoder.decode(chunk)
            except UnicodeDecodeError as e:
                text = _decode_valid_prefix(decoder, chunk, e)
                # Invalid bytes past the sample are never examined.
                if n_chars + len(text) < self.sample_chars:
                    raise
                parts.append(text)
                break
            parts.append(text)
            n_chars += len(text)

        text = "".join(parts)
        sample = text[: self.sample_chars]
        # The LF of a CRLF pair cut by the cap lies outside the sample.
        if (
            len(text) > self.sample_chars
            and sample.endswith("\r")
            and text[self.sample_chars] == "\n"
        ):
            sample = sample[:-1]
        return sample


def _decode_valid_prefix(
    decoder: codecs.IncrementalDecoder, chunk: bytes, error: UnicodeDecodeError
) -> str:
    """Decode the part of *chunk* preceding the bytes that failed in *error*.

    ``error.object`` may carry bytes left pending from the previous chunk
    ahead of *chunk* itself.
    """
    end = error.start - (len(error.object) - len(chunk))
    if end <= 0:
        return ""
    return decoder.decode(chunk[:end])
