"""Charset name canonicalization and equivalence.

This module defines:

1. **Registries**: the authoritative source of canonical charset names.  The
   default :class:`CodecsRegistry` defers to :func:`codecs.lookup`; any object
   with a ``canonical_name()`` method can stand in for it.

2. **Equivalence**: two names are equivalent when the registry maps them to
   the same canonical form (``utf-8``, ``UTF8`` and ``utf8`` all resolve to
   ``utf-8``).  No alias table is kept here beyond the one fixup below.

3. **The MS932 fixup**: Shift_JIS and MS932 are reported under the canonical
   name of MS932 (``cp932``), the name text-oriented consumers expect for
   this Japanese legacy encoding.
"""

from __future__ import annotations

import codecs
from typing import Protocol

#: Names whose canonical forms trigger the MS932 fixup.
MS932_ALIASES: tuple[str, ...] = ("Shift_JIS", "MS932")

#: Name the fixup resolves to (before canonicalization).
MS932_TARGET: str = "MS932"


class UnknownCharsetError(LookupError):
    """Raised when a charset name cannot be resolved by the registry."""

    def __init__(self, name: object) -> None:
        super().__init__(f"unknown charset: {name!r}")
        self.name = name


class CharsetRegistry(Protocol):
    """Anything that maps a charset name to its canonical spelling."""

    def canonical_name(self, name: str) -> str:
        """Return the canonical form of *name*.

        :raises LookupError: If *name* is not a known charset.
        """
        ...


class CodecsRegistry:
    """Registry backed by Python's codec database."""

    def canonical_name(self, name: str) -> str:
        try:
            return codecs.lookup(name).name
        except (LookupError, TypeError, ValueError) as e:
            raise UnknownCharsetError(name) from e


class CharsetNameResolver:
    """Canonicalize and compare charset names through a registry.

    The resolver holds no mutable state, so a single instance may be shared
    between threads as long as its registry is stateless too.
    """

    def __init__(self, registry: CharsetRegistry | None = None) -> None:
        self.registry = registry if registry is not None else CodecsRegistry()

    def canonicalize(self, name: str) -> str:
        """Resolve *name* to the registry's canonical form.

        :raises UnknownCharsetError: If *name* is unknown or malformed.
        """
        if not isinstance(name, str):
            raise UnknownCharsetError(name)
        try:
            return self.registry.canonical_name(name)
        except UnknownCharsetError:
            raise
        except LookupError as e:
            raise UnknownCharsetError(name) from e

    def are_equivalent(self, a: str | None, b: str | None) -> bool:
        """Check whether two charset names really mean the same charset.

        Returns ``False`` when either name is ``None`` or unknown to the
        registry; comparison is a best-effort query and never raises.
        """
        if a is None or b is None:
            return False
        try:
            return self.canonicalize(a) == self.canonicalize(b)
        except UnknownCharsetError:
            return False

    def apply_alias_fixup(self, name: str) -> str:
        """Return the canonical MS932 name if *name* is Shift_JIS or MS932.

        Any other name is returned unchanged, as is every name when the
        registry does not know MS932.
        """
        if any(self.are_equivalent(name, alias) for alias in MS932_ALIASES):
            try:
                return self.canonicalize(MS932_TARGET)
            except UnknownCharsetError:
                return name
        return name
