"""Generation of valid Vietnamese syllables and sound classification."""

from __future__ import annotations

import re
from enum import IntEnum
from typing import Iterable

from bamboo.chars import is_vowel
from bamboo.trie import Node, add_trie


class Sound(IntEnum):
    """The part of a syllable a letter belongs to."""

    NO_SOUND = 0
    FIRST_CONSONANT = 1
    VOWEL = 2
    LAST_CONSONANT = 3


_FIRST_CONSONANTS = (
    "b d đ g gh m n nh p ph r s t tr v z",
    "c h k kh qu th",
    "ch gi l ng ngh x",
)

_VOWEL_GROUPS = (
    "ê i ua uê uy y",
    "a iê oa uyê yê",
    "â ă e o oo ô ơ oe u ư uâ uô ươ",
    "oă",
    "uơ",
    "ai ao au âu ay ây eo êu ia iêu iu oai oao oay oeo oi ôi ơi ưa uây ui ưi "
    "uôi ươi ươu ưu uya uyu yêu",
)

_LAST_CONSONANTS = (
    "ch nh",
    "c ng",
    "m n p t",
)

# Which vowel groups may follow each first-consonant group.
_CV_MATRIX = (
    (0, 1, 2, 5),
    (0, 1, 2, 3, 4, 5),
    (0, 1, 2, 3, 5),
)

# Which last-consonant groups may follow each vowel group.
_VC_MATRIX = (
    (0, 2),
    (0, 1, 2),
    (1, 2),
    (1, 2),
    (),
    (),
)


def _generate_vowels() -> list[str]:
    return [v for group in _VOWEL_GROUPS for v in group.split(" ")]


def _generate_cv() -> list[str]:
    words = []
    for c_row, v_rows in enumerate(_CV_MATRIX):
        for v_row in v_rows:
            words.extend(
                c + v
                for c in _FIRST_CONSONANTS[c_row].split(" ")
                for v in _VOWEL_GROUPS[v_row].split(" ")
            )
    return words


def _generate_vc() -> list[str]:
    words = []
    for v_row, c_rows in enumerate(_VC_MATRIX):
        for c_row in c_rows:
            words.extend(
                v + c
                for v in _VOWEL_GROUPS[v_row].split(" ")
                for c in _LAST_CONSONANTS[c_row].split(" ")
            )
    return words


def _generate_cvc() -> list[str]:
    words = []
    for c1_row, v_rows in enumerate(_CV_MATRIX):
        for v_row in v_rows:
            for c2_row in _VC_MATRIX[v_row]:
                words.extend(
                    c1 + v + c2
                    for c1 in _FIRST_CONSONANTS[c1_row].split(" ")
                    for v in _VOWEL_GROUPS[v_row].split(" ")
                    for c2 in _LAST_CONSONANTS[c2_row].split(" ")
                )
    return words


def generate_dictionary() -> list[str]:
    """Return every syllable the spelling rules allow, without tones."""
    return _generate_vowels() + _generate_cv() + _generate_vc() + _generate_cvc()


spelling_trie = Node()
for _word in generate_dictionary():
    add_trie(spelling_trie, _word, False, False)


def add_dictionary_to_spelling_trie(dictionary: Iterable[str]) -> None:
    """Add words (a mapping's keys or any iterable) to the spelling trie as dictionary words."""
    for word in dictionary:
        add_trie(spelling_trie, word, True, False)


_QU_GI = re.compile(r"(qu|gi)([^\W\d_]+)")


def parse_sounds_from_word(word: str) -> list[Sound]:
    """Classify each letter of a word, treating a leading qu/gi as a consonant."""
    if not word:
        return []
    match = _QU_GI.match(word)
    if match is None:
        return parse_dump_sounds_from_word(word)
    tail = match.group(2)
    if is_vowel(tail[0]):
        return [Sound.FIRST_CONSONANT, Sound.FIRST_CONSONANT] + parse_dump_sounds_from_word(tail)
    return parse_dump_sounds_from_word(word)


def parse_dump_sounds_from_word(word: str) -> list[Sound]:
    """Classify each character: consonants before the first vowel are first consonants."""
    sounds = []
    had_vowel = False
    for c in word:
        if is_vowel(c):
            sounds.append(Sound.VOWEL)
            had_vowel = True
        elif c.isalpha():
            sounds.append(Sound.LAST_CONSONANT if had_vowel else Sound.FIRST_CONSONANT)
        else:
            sounds.append(Sound.NO_SOUND)
    return sounds