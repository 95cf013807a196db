"""Vietnamese input method engine with spelling checks and legacy charset encoding."""

__version__ = "0.5.4"

__all__ = [
    "chars",
    "trie",
    "spelling",
    "parser",
    "composition",
    "transform",
    "engine",
    "legacy_charsets",
    "encoder",
]