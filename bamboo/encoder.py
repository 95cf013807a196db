"""Conversion of Unicode Vietnamese text into legacy charsets and escapes."""

from __future__ import annotations

from bamboo.legacy_charsets import CHARSET_DEFINITIONS

UNICODE = "Unicode"


def encode(charset_name: str, text: str) -> str:
    """Spell the text in the named charset.

    Characters the charset has no entry for are kept as they are. Text passes
    through unchanged for "Unicode" and for names that are not known.
    """
    if charset_name == UNICODE:
        return text
    table = CHARSET_DEFINITIONS.get(charset_name)
    if table is None:
        return text
    return "".join(table.get(ch, ch) for ch in text)


def get_charset_names() -> list[str]:
    """Return the names encode() accepts, with "Unicode" first."""
    return [UNICODE, *CHARSET_DEFINITIONS]