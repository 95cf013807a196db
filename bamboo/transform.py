"""Building the transformations a key stroke produces on a composition."""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Iterable, Sequence

from bamboo.chars import Mark, Tone, find_tone_from_char, is_vowel
from bamboo.composition import EngineFlag, Mode, Transformation, flatten
from bamboo.parser import VIRTUAL_KEY, EffectType, Rule
from bamboo.spelling import Sound, parse_sounds_from_word, spelling_trie
from bamboo.trie import FindResult, match_string

logger = logging.getLogger(__name__)

# A "uơ" or "ưo" pair followed by at least one more letter.
UOH_UHO_TAIL = re.compile(r"(uơ|ưo)[^\W\d_]")
_UOH_UHO = re.compile(r"uơ|ưo")
_UHO_UHOH = re.compile(r"ưo|ươ")

_SPELLING_MODE = Mode.VIETNAMESE | Mode.TONE_LESS | Mode.LOWER_CASE
_TONELESS_LOWER = Mode.TONE_LESS | Mode.LOWER_CASE
_ENGLISH_LOWER = Mode.ENGLISH | Mode.LOWER_CASE

# Last consonants that only go with the acute and dot tones.
_STOP_CONSONANTS = ("c", "k", "p", "t", "ch")
_SECOND_VOWEL_TONED = ("oa", "oe", "uy", "ue", "uo")

Composition = Sequence[Transformation]


def find_last_appending_trans(composition: Composition) -> Transformation | None:
    """Return the last transformation that appends a letter, or None."""
    for trans in reversed(composition):
        if trans.rule.effect_type == EffectType.APPENDING:
            return trans
    return None


def _has_appending_after(composition: Composition, trans: Transformation) -> bool:
    index = _index_of(composition, trans)
    if index < 0:
        return False
    return _has_appending(composition[index + 1 :])


def new_appending_trans(key: str, is_upper_case: bool) -> Transformation:
    """Return a transformation that appends the key itself."""
    rule = Rule(key=key, effect_type=EffectType.APPENDING, effect_on=key, result=key)
    return Transformation(rule=rule, is_upper_case=is_upper_case)


def _generate_appending_trans(
    rules: Iterable[Rule], lower_key: str, is_upper_case: bool
) -> Transformation:
    for rule in rules:
        if rule.key == lower_key and rule.effect_type == EffectType.APPENDING:
            upper = is_upper_case or rule.effect_on.isupper()
            letter = rule.effect_on.lower()
            return Transformation(
                rule=replace(rule, effect_on=letter, result=letter), is_upper_case=upper
            )
    return new_appending_trans(lower_key, is_upper_case)


def _appending_only(composition: Composition) -> list[Transformation]:
    return [t for t in composition if t.rule.effect_type == EffectType.APPENDING]


def _find_root_target(trans: Transformation) -> Transformation:
    while trans.target is not None:
        trans = trans.target
    return trans


def _combination_with_sounds(
    composition: Composition,
) -> tuple[list[Transformation], list[Sound]]:
    letters = _appending_only(composition)
    if not letters:
        return letters, []
    return letters, parse_sounds_from_word(flatten(letters, _SPELLING_MODE))


def _composition_by_sound(composition: Composition, sound: Sound) -> list[Transformation]:
    letters, sounds = _combination_with_sounds(composition)
    if len(letters) != len(sounds):
        logger.warning("the sounds do not line up with the letters of the composition")
        return letters
    return [t for t, s in zip(letters, sounds) if s == sound]


def get_spelling_match_result(
    composition: Composition, mode: Mode, dictionary: bool
) -> FindResult:
    """Check the rendered composition against the spelling trie.

    Empty and one-letter compositions always match fully.
    """
    if not composition:
        return FindResult.MATCH_FULL
    text = flatten(list(composition), mode)
    if len(text) <= 1:
        return FindResult.MATCH_FULL
    return match_string(spelling_trie, text, dictionary)


def get_rightmost_vowels(composition: Composition) -> list[Transformation]:
    """Return the appending transformations that make up the vowel sound."""
    return _composition_by_sound(composition, Sound.VOWEL)


def _contains(composition: Iterable[Transformation], trans: Transformation | None) -> bool:
    return any(t is trans for t in composition)


def _rightmost_vowels_with_marks(composition: Composition) -> list[Transformation]:
    vowels = get_rightmost_vowels(composition)
    return [
        t
        for t in composition
        if _contains(vowels, t)
        or (t.rule.effect_type == EffectType.MARK_TRANSFORMATION and _contains(vowels, t.target))
    ]


def find_tone_target(composition: Composition, std_style: bool) -> Transformation | None:
    """Return the vowel that should carry the tone, or None."""
    if not composition:
        return None
    vowels = get_rightmost_vowels(composition)
    if len(vowels) == 1:
        return vowels[0]
    if len(vowels) == 2 and std_style:
        chars = flatten(_rightmost_vowels_with_marks(composition), _TONELESS_LOWER)
        oh_pos = chars.find("ơ")
        if oh_pos > 0:
            return vowels[oh_pos]
        eh_pos = chars.find("ê")
        if eh_pos > 0:
            return vowels[eh_pos]
        if _has_appending_after(composition, vowels[1]):
            return vowels[1]
        return vowels[0]
    if len(vowels) == 2:
        if _has_appending_after(composition, vowels[1]):
            return vowels[1]
        if flatten(vowels, _ENGLISH_LOWER) in _SECOND_VOWEL_TONED:
            return vowels[1]
        return vowels[0]
    if len(vowels) == 3:
        if flatten(vowels, _ENGLISH_LOWER) == "uye":
            return vowels[2]
        return vowels[1]
    return None


def _have_valid_tone(composition: Composition, tone: Tone) -> bool:
    if tone in (Tone.NONE, Tone.ACUTE, Tone.DOT):
        return True
    last = flatten(_composition_by_sound(composition, Sound.LAST_CONSONANT), _ENGLISH_LOWER)
    return last not in _STOP_CONSONANTS


def _last_tone_transformation(composition: Composition) -> Transformation | None:
    for trans in reversed(composition):
        if trans.rule.effect_type == EffectType.TONE_TRANSFORMATION and trans.target is not None:
            return trans
    return None


def _is_free(
    composition: Composition, trans: Transformation | None, effect_type: EffectType
) -> bool:
    return not any(t.target is trans and t.rule.effect_type == effect_type for t in composition)


def _index_of(composition: Composition, trans: Transformation) -> int:
    for index, t in enumerate(composition):
        if t is trans:
            return index
    return -1


def _has_appending(composition: Iterable[Transformation]) -> bool:
    return any(t.rule.effect_type == EffectType.APPENDING for t in composition)


def get_last_word(
    composition: Composition, effective_keys: Iterable[str] | None
) -> list[Transformation]:
    """Return the transformations after the last word-breaking character."""
    keys = set(effective_keys or ())
    for index in range(len(composition) - 1, -1, -1):
        rule = composition[index].rule
        if (
            rule.effect_type == EffectType.APPENDING
            and not rule.effect_on.isalpha()
            and rule.effect_on not in keys
        ):
            return list(composition[index + 1 :])
    return list(composition)


def get_last_syllable(composition: Composition) -> list[Transformation]:
    """Return the longest tail of the composition that spells a valid syllable."""
    remaining = list(composition)
    while True:
        if not _has_appending(remaining):
            return []
        syllable: list[Transformation] = []
        restart: list[Transformation] | None = None
        for index, trans in enumerate(remaining):
            syllable.append(trans)
            if not _has_appending(syllable):
                continue
            text = flatten(syllable, _SPELLING_MODE)
            if not text:
                continue
            if match_string(spelling_trie, text, False) == FindResult.NOT_MATCH:
                restart = remaining[1:] if index == 0 else remaining[index:]
                break
        if restart is None:
            return syllable
        remaining = restart


def _split_at(
    composition: Composition, tail: list[Transformation]
) -> tuple[list[Transformation], list[Transformation]]:
    if not tail:
        return [], list(composition)
    index = _index_of(composition, tail[0])
    previous = list(composition[:index]) if index > 0 else []
    return tail, previous


def extract_last_word(
    composition: Composition, effective_keys: Iterable[str] | None
) -> tuple[list[Transformation], list[Transformation]]:
    """Split the composition into (last word, everything before it)."""
    if not composition:
        return [], []
    return _split_at(composition, get_last_word(composition, effective_keys))


def extract_last_syllable(
    composition: Composition,
) -> tuple[list[Transformation], list[Transformation]]:
    """Split the composition into (last syllable, everything before it)."""
    if not composition:
        return [], []
    return _split_at(composition, get_last_syllable(get_last_word(composition, None)))


def _find_mark_target(
    composition: Composition, rules: Sequence[Rule]
) -> tuple[Transformation | None, Rule | None]:
    current = flatten(list(composition), Mode.VIETNAMESE)
    for trans in reversed(composition):
        for rule in rules:
            if rule.effect_type != EffectType.MARK_TRANSFORMATION:
                continue
            if trans.rule.result != rule.effect_on or rule.effect <= 0:
                continue
            target = _find_root_target(trans)
            candidate = [*composition, Transformation(rule=rule, target=target)]
            if flatten(candidate, Mode.VIETNAMESE) == current:
                continue
            if get_spelling_match_result(candidate, _TONELESS_LOWER, False) != FindResult.NOT_MATCH:
                return target, rule
    return None, None


def _tone_target(
    composition: Composition, rule: Rule, flags: int
) -> Transformation | None:
    if flags & EngineFlag.FREE_TONE_MARKING:
        if _have_valid_tone(composition, Tone(rule.effect)):
            return find_tone_target(composition, bool(flags & EngineFlag.STD_TONE_STYLE))
        return None
    last = find_last_appending_trans(composition)
    if last is not None and is_vowel(last.rule.effect_on):
        return last
    return None


def find_target(
    composition: Composition, applicable_rules: Sequence[Rule], flags: int
) -> tuple[Transformation | None, Rule | None]:
    """Find what one of the rules can change: a tone target first, then a mark target.

    Returns (target, rule); the target is None when nothing applies.
    """
    current = flatten(list(composition), Mode.VIETNAMESE)
    for rule in applicable_rules:
        if rule.effect_type != EffectType.TONE_TRANSFORMATION:
            continue
        target = _tone_target(composition, rule, flags)
        candidate = [*composition, Transformation(rule=rule, target=target)]
        if flatten(candidate, Mode.VIETNAMESE) == current:
            continue
        if (
            target is not None
            and Tone(rule.effect) == Tone.NONE
            and _is_free(composition, target, EffectType.TONE_TRANSFORMATION)
            and find_tone_from_char(target.rule.result) == Tone.NONE
        ):
            target = None
        return target, rule
    return _find_mark_target(composition, applicable_rules)


def _generate_undo_transformations(
    composition: Composition, rules: Sequence[Rule], flags: int
) -> list[Transformation]:
    undo: list[Transformation] = []
    current = flatten(list(composition), _SPELLING_MODE)
    for rule in rules:
        if rule.effect_type == EffectType.TONE_TRANSFORMATION:
            target = _tone_target(composition, rule, flags)
            if target is None:
                continue
            undo.append(
                Transformation(
                    rule=Rule(key=VIRTUAL_KEY, effect_type=EffectType.TONE_TRANSFORMATION),
                    target=target,
                )
            )
        elif rule.effect_type == EffectType.MARK_TRANSFORMATION:
            for trans in reversed(composition):
                if trans.rule.result != rule.effect_on:
                    continue
                reset = Transformation(
                    rule=Rule(key=VIRTUAL_KEY, effect_type=EffectType.MARK_TRANSFORMATION),
                    target=_find_root_target(trans),
                )
                if flatten([*composition, reset], _SPELLING_MODE) == current:
                    continue
                undo.append(reset)
    return undo


def generate_transformations(
    composition: Composition,
    applicable_rules: Sequence[Rule],
    flags: int,
    lower_key: str,
    is_upper_case: bool,
) -> list[Transformation]:
    """Return the transformations a key produces, or an empty list if it has no effect."""
    # Typing an effect key twice undoes it: w + w -> w
    if composition:
        last = composition[-1]
        rule = last.rule
        if (
            rule.effect_type == EffectType.APPENDING
            and rule.key == lower_key
            and rule.key != rule.result
        ):
            raw = Rule(
                key=VIRTUAL_KEY,
                effect_type=EffectType.MARK_TRANSFORMATION,
                effect=int(Mark.RAW),
            )
            return [Transformation(rule=raw, target=last)]

    target, rule = find_target(composition, applicable_rules, flags)
    if target is not None and rule is not None:
        result = [Transformation(rule=rule, target=target, is_upper_case=is_upper_case)]
        new_comp = [*composition, *result]
        if (
            rule.effect_type == EffectType.MARK_TRANSFORMATION
            and _UOH_UHO.search(flatten(new_comp, _SPELLING_MODE))
            and get_spelling_match_result(new_comp, _TONELESS_LOWER, False)
            == FindResult.MATCH_PREFIX
        ):
            # The uow shortcut: put the horn on the other letter of the pair too.
            second, virtual = find_target(new_comp, applicable_rules, flags)
            if second is not None and virtual is not None:
                result.append(
                    Transformation(rule=replace(virtual, key=VIRTUAL_KEY), target=second)
                )
        return result

    # ươ/ưo + o -> uô
    if _UHO_UHOH.search(flatten(list(composition), _SPELLING_MODE)):
        vowels = _rightmost_vowels_with_marks(composition)
        if vowels:
            reset = Transformation(
                rule=Rule(
                    key=VIRTUAL_KEY,
                    effect_type=EffectType.MARK_TRANSFORMATION,
                    effect=int(Mark.NONE),
                ),
                target=vowels[0],
            )
            second, second_rule = find_target(
                [*composition, reset], applicable_rules, flags
            )
            if second is not None and second_rule is not None and second is not vowels[0]:
                return [
                    reset,
                    Transformation(rule=second_rule, target=second, is_upper_case=is_upper_case),
                ]

    # A key that finds no target undoes its siblings: ươ + w -> uow
    undo = _generate_undo_transformations(composition, applicable_rules, flags)
    if undo:
        return [*undo, new_appending_trans(lower_key, is_upper_case)]
    return []


def generate_fallback_transformations(
    applicable_rules: Sequence[Rule], lower_key: str, is_upper_case: bool
) -> list[Transformation]:
    """Return the appending transformations used when a key has no effect."""
    first = _generate_appending_trans(applicable_rules, lower_key, is_upper_case)
    result = [first]
    for appended in first.rule.appended_rules:
        upper = is_upper_case or appended.effect_on.isupper()
        letter = appended.effect_on.lower()
        result.append(
            Transformation(
                rule=replace(appended, key=VIRTUAL_KEY, effect_on=letter, result=letter),
                is_upper_case=upper,
            )
        )
    return result


def break_composition(composition: Composition) -> list[Transformation]:
    """Replace every typed key by a plain appending transformation; drop virtual ones."""
    return [
        new_appending_trans(t.rule.key, t.is_upper_case)
        for t in composition
        if t.rule.key != VIRTUAL_KEY
    ]


def refresh_last_tone_target(
    composition: Composition, std_style: bool
) -> list[Transformation]:
    """Move the last tone to the vowel that should now carry it.

    Retargets the last tone transformation in place and returns the
    transformations that clear and re-apply the tone; empty if nothing moves.
    """
    vowels = get_rightmost_vowels(composition)
    last_tone = _last_tone_transformation(composition)
    if not vowels or last_tone is None:
        return []
    new_target = find_tone_target(composition, std_style)
    if last_tone.target is new_target:
        return []
    last_tone.target = new_target
    return [
        Transformation(
            rule=Rule(
                key=VIRTUAL_KEY,
                effect_type=EffectType.TONE_TRANSFORMATION,
                effect=int(Tone.NONE),
            ),
            target=new_target,
        ),
        Transformation(rule=replace(last_tone.rule, key=VIRTUAL_KEY), target=new_target),
    ]