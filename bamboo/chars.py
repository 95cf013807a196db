"""Vietnamese character tables: vowels, tones and diacritic marks."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable


class Tone(IntEnum):
    """Tone marks, in the order they appear in each vowel group of VOWELS."""

    NONE = 0
    GRAVE = 1
    ACUTE = 2
    HOOK = 3
    TILDE = 4
    DOT = 5


class Mark(IntEnum):
    """Diacritic marks that change a letter (hat, breve, horn, dash)."""

    NONE = 0
    HAT = 1
    BREVE = 2
    HORN = 3
    DASH = 4
    RAW = 5


VOWELS = (
    "aàáảãạăằắẳẵặâầấẩẫậeèéẻẽẹêềếểễệiìíỉĩịoòóỏõọôồốổỗộơờớởỡợuùúủũụưừứửữựyỳýỷỹỵ"
)

WORD_BREAK_SYMBOLS = frozenset(",;:.\"'!? <>=+-*/\\_~`@#$%^&(){}[]|")

_VOWEL_POSITIONS = {vowel: pos for pos, vowel in enumerate(VOWELS)}

# Each family lists the letter with no mark, then HAT, BREVE, HORN, DASH;
# "_" marks a slot the family does not use.
_MARK_FAMILIES = {
    "a": "aâă__",
    "â": "aâă__",
    "ă": "aâă__",
    "e": "eê___",
    "ê": "eê___",
    "o": "oô_ơ_",
    "ô": "oô_ơ_",
    "ơ": "oô_ơ_",
    "u": "u__ư_",
    "ư": "u__ư_",
    "d": "d___đ",
    "đ": "d___đ",
}

# Returned by add_mark_to_char when the mark has no form for the letter.
NO_CHAR = "\x00"


def is_word_break_symbol(key: str) -> bool:
    """Return True for digits and punctuation that end a word."""
    return "0" <= key <= "9" and len(key) == 1 or key in WORD_BREAK_SYMBOLS


def is_vowel(chr: str) -> bool:
    """Return True if the character is a Vietnamese vowel (any tone, lower case)."""
    return chr in _VOWEL_POSITIONS


def has_vowel(seq: Iterable[str]) -> bool:
    """Return True if any character of the sequence is a vowel."""
    return any(is_vowel(c) for c in seq)


def find_vowel_position(chr: str) -> int:
    """Return the index of the character in VOWELS, or -1."""
    return _VOWEL_POSITIONS.get(chr, -1)


def get_mark_family(chr: str) -> str:
    """Return the letters that differ from the character only by a mark."""
    return _MARK_FAMILIES.get(chr, "").replace("_", "")


def find_mark_position(chr: str) -> int:
    """Return the slot of the character within its mark family, or -1."""
    family = _MARK_FAMILIES.get(chr)
    if family is None:
        return -1
    return family.find(chr)


def find_mark_from_char(chr: str) -> Mark | None:
    """Return the mark the character carries, or None if it has no mark family."""
    pos = find_mark_position(chr)
    if pos < 0:
        return None
    return Mark(pos)


def remove_mark_from_char(chr: str) -> str:
    """Strip the mark from a tone-less character; other characters pass through."""
    family = _MARK_FAMILIES.get(chr)
    if family:
        return family[0]
    return chr


def add_mark_to_char(chr: str, mark: int) -> str:
    """Put the mark on the character, keeping its tone.

    Returns NO_CHAR when the letter has no form with that mark.
    """
    tone = find_tone_from_char(chr)
    base = add_tone_to_char(chr, Tone.NONE)
    result = NO_CHAR
    family = _MARK_FAMILIES.get(base)
    if family is not None and family[mark] != "_":
        result = family[mark]
    return add_tone_to_char(result, tone)


def is_alpha(c: str) -> bool:
    """Return True for an ASCII letter."""
    return len(c) == 1 and ("a" <= c <= "z" or "A" <= c <= "Z")


def find_tone_from_char(chr: str) -> Tone:
    """Return the tone of a vowel; non-vowels have Tone.NONE."""
    pos = find_vowel_position(chr)
    if pos == -1:
        return Tone.NONE
    return Tone(pos % 6)


def add_tone_to_char(chr: str, tone: int) -> str:
    """Replace the tone of a vowel; non-vowels pass through unchanged."""
    pos = find_vowel_position(chr)
    if pos < 0:
        return chr
    return VOWELS[pos - pos % 6 + int(tone)]


def remove_tone_from_word(word: str) -> str:
    """Remove the tones from every vowel of the word."""
    return "".join(add_tone_to_char(c, Tone.NONE) for c in word)


def has_vietnamese_char(word: str) -> bool:
    """Return True if the word holds a toned vowel or a marked letter."""
    for chr in word:
        c = chr.lower()
        if find_tone_from_char(c) != Tone.NONE:
            return True
        mark = find_mark_from_char(add_tone_to_char(c, Tone.NONE))
        if mark is not None and mark != Mark.NONE:
            return True
    return False