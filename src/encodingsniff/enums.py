"""Enumerations for encodingsniff."""

import enum


class LineEnding(enum.Enum):
    """Dominant line terminator style of a text sample."""

    CRLF = "CRLF"
    CR = "CR"
    LF = "LF"
    MIXED = "Mixed"
    NONE = "None"


class CharsetFamily(enum.Enum):
    """Regional or vendor family a charset belongs to, for presentation."""

    JAPAN = "japan"
    CHINA = "china"
    KOREA = "korea"
    US = "us"
    LATIN = "latin"
    GREECE = "greece"
    TURKEY = "turkey"
    VIETNAM = "vietnam"
    WINDOWS = "windows"
    MAC = "mac"
    IBM = "ibm"
    UNICODE = "unicode"
    NONE = "none"
