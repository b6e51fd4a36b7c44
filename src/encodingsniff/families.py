"""Charset family lookup for presentation layers.

Maps a canonical charset name to the regional or vendor family a UI would
badge it with.  Rules are tried in order and the first match wins, so the
specific code pages (``1252``, ``1253``, ...) must precede the generic
``windows`` and ``cp<digits>`` rules.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from encodingsniff.enums import CharsetFamily
from encodingsniff.equivalences import CharsetNameResolver, UnknownCharsetError

_CODE_PAGE = re.compile(r"cp\d+")

_RULES: list[tuple[CharsetFamily, Callable[[str], bool]]] = [
    (
        CharsetFamily.JAPAN,
        lambda n: n in ("cp932", "windows-31j") or "jp" in n or "jis" in n,
    ),
    (
        CharsetFamily.CHINA,
        lambda n: (
            "big5" in n or n.startswith("gb") or "cn" in n or "950" in n or n == "hz"
        ),
    ),
    (CharsetFamily.KOREA, lambda n: n.endswith("kr") or "949" in n or n == "johab"),
    (CharsetFamily.US, lambda n: n in ("ascii", "us-ascii")),
    (CharsetFamily.LATIN, lambda n: "1252" in n or "8859" in n or "latin" in n),
    (CharsetFamily.GREECE, lambda n: "1253" in n),
    (CharsetFamily.TURKEY, lambda n: "1254" in n or "857" in n),
    (CharsetFamily.VIETNAM, lambda n: "1258" in n),
    (
        CharsetFamily.WINDOWS,
        lambda n: "windows" in n or n.startswith("cp125") or n == "cp874",
    ),
    (CharsetFamily.MAC, lambda n: "mac" in n),
    (CharsetFamily.IBM, lambda n: "ibm" in n or _CODE_PAGE.fullmatch(n) is not None),
    (CharsetFamily.UNICODE, lambda n: "utf" in n),
]


def charset_family(
    encoding: str | None, resolver: CharsetNameResolver | None = None
) -> CharsetFamily:
    """Return the :class:`CharsetFamily` of *encoding*.

    The name is canonicalized first; unknown names map to
    :attr:`CharsetFamily.NONE`.
    """
    if encoding is None:
        return CharsetFamily.NONE
    resolver = resolver if resolver is not None else CharsetNameResolver()
    try:
        name = resolver.canonicalize(encoding).lower()
    except UnknownCharsetError:
        return CharsetFamily.NONE
    for family, matches in _RULES:
        if matches(name):
            return family
    return CharsetFamily.NONE
