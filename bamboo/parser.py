"""Input method definitions and the rules parsed from them."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Mapping

from bamboo.chars import (
    Mark,
    Tone,
    add_tone_to_char,
    find_mark_from_char,
    get_mark_family,
    is_vowel,
)

# The key of a rule that no key stroke produced.
VIRTUAL_KEY = ""


class EffectType(IntEnum):
    """What a rule does to the text."""

    APPENDING = 0
    MARK_TRANSFORMATION = 1
    TONE_TRANSFORMATION = 2
    REPLACING = 3


@dataclass(frozen=True)
class Rule:
    """One effect a key can have: append a letter, add a mark or a tone."""

    key: str = VIRTUAL_KEY
    effect_type: EffectType = EffectType.APPENDING
    effect: int = 0
    effect_on: str = ""
    result: str = ""
    appended_rules: tuple[Rule, ...] = ()

    @property
    def tone(self) -> Tone:
        """The effect read as a tone."""
        return Tone(self.effect)

    @property
    def mark(self) -> Mark:
        """The effect read as a mark."""
        return Mark(self.effect)


@dataclass
class InputMethod:
    """A named input method with its rules and the keys it handles."""

    name: str = ""
    rules: list[Rule] = field(default_factory=list)
    super_keys: list[str] = field(default_factory=list)
    tone_keys: list[str] = field(default_factory=list)
    keys: list[str] = field(default_factory=list)


# Tone names in the order most layouts assign them to keys:
# remove tone, acute, grave, hook, tilde, dot.
_TONE_ORDER = ("XoaDauThanh", "DauSac", "DauHuyen", "DauHoi", "DauNga", "DauNang")

_TONE_NAMES: dict[str, Tone] = dict(
    zip(_TONE_ORDER, (Tone.NONE, Tone.ACUTE, Tone.GRAVE, Tone.HOOK, Tone.TILDE, Tone.DOT))
)


def _tone_keys(keys: Iterable[str], names: Iterable[str] = _TONE_ORDER) -> dict[str, str]:
    return dict(zip(keys, names))


def _letter_keys(triples: Iterable[tuple[str, str, str]]) -> dict[str, str]:
    """Keys that type a letter directly: one for lower case, one for upper."""
    result: dict[str, str] = {}
    for lower_key, upper_key, letter in triples:
        result[lower_key] = "__" + letter
        result[upper_key] = "_" + letter.upper()
    return result


_TELEX = {
    **_tone_keys("zsfrxj"),
    "a": "A_Â",
    "e": "E_Ê",
    "o": "O_Ô",
    "w": "UOA_ƯƠĂ",
    "d": "D_Đ",
}

_VNI = {
    **_tone_keys("012345"),
    "6": "AEO_ÂÊÔ",
    "7": "UO_ƯƠ",
    "8": "A_Ă",
    "9": "D_Đ",
}

_VIQR = {
    **_tone_keys("0'`?~."),
    "^": "AEO_ÂÊÔ",
    "+": "UO_ƯƠ",
    "*": "UO_ƯƠ",
    "(": "A_Ă",
    "\\": "D_Đ",
}

_MICROSOFT = {
    **_tone_keys("85679", _TONE_ORDER[1:]),
    **_letter_keys(
        [
            ("1", "!", "ă"),
            ("2", "@", "â"),
            ("3", "#", "ê"),
            ("4", "$", "ô"),
            ("0", ")", "đ"),
            ("[", "{", "ư"),
            ("]", "}", "ơ"),
        ]
    ),
}

_VNI_FRENCH = {
    **_tone_keys("&é\"'(-"),
    "è": "AEO_ÂÊÔ",
    "_": "UO_ƯƠ",
    "ç": "A_Ă",
    "à": "D_Đ",
}

INPUT_METHOD_DEFINITIONS: dict[str, dict[str, str]] = {
    "Telex": dict(_TELEX),
    "VNI": dict(_VNI),
    "VIQR": dict(_VIQR),
    "Microsoft layout": _MICROSOFT,
    "Telex 2": {
        **_TELEX,
        "w": "UOA_ƯƠĂ__Ư",
        "]": "__ư",
        "[": "__ơ",
        "}": "_Ư",
        "{": "_Ơ",
    },
    "Telex + VNI": {**_TELEX, **_VNI},
    "Telex + VNI + VIQR": {**_TELEX, **_VNI, **_VIQR},
    "VNI Bàn phím tiếng Pháp": _VNI_FRENCH,
    "Telex 3": {**_TELEX, "[": "__ươ", "{": "_ƯƠ"},
}

_LETTER = r"[^\W\d_]"
# "<letters>_<results>[_<appended letters>]", e.g. "UOA_ƯƠĂ__Ư"
_DSL = re.compile(rf"([a-zA-Z]+)_({_LETTER}+)([^\W\d]*)")
# "_<letter>" or "__<letters>"
_DSL_APPENDING = re.compile(rf"(_?)_({_LETTER}+)")


def parse_input_method(definitions: Mapping[str, Mapping[str, str]], name: str) -> InputMethod:
    """Parse the named input method; an unknown name gives an empty one."""
    definition = definitions.get(name)
    if definition is None:
        return InputMethod()
    return _parse_input_method(name, definition)


def parse_input_methods(definitions: Mapping[str, Mapping[str, str]]) -> dict[str, InputMethod]:
    """Parse every input method of the definitions, keyed by name."""
    return {name: _parse_input_method(name, definition) for name, definition in definitions.items()}


def _parse_input_method(name: str, definition: Mapping[str, str]) -> InputMethod:
    im = InputMethod(name=name)
    for key_str, line in definition.items():
        if not key_str:
            continue
        key = key_str[0]
        im.rules.extend(parse_rules(key, line))
        if "uo" in line.lower():
            im.super_keys.append(key)
        if line in _TONE_NAMES:
            im.tone_keys.append(key)
        im.keys.append(key)
    return im


def parse_rules(key: str, line: str) -> list[Rule]:
    """Parse the rules one definition line gives the key."""
    tone = _TONE_NAMES.get(line)
    if tone is not None:
        return [Rule(key=key, effect_type=EffectType.TONE_TRANSFORMATION, effect=int(tone))]
    return parse_toneless_rules(key, line)


def parse_toneless_rules(key: str, line: str) -> list[Rule]:
    """Parse a mark or appending definition line."""
    match = _DSL.search(line.lower())
    if match is None:
        appending = _appending_rule(key, line)
        return [appending] if appending is not None else []

    effective_ons, results, tail = match.groups()
    if len(results) < len(effective_ons):
        raise ValueError(f"definition {line!r} has fewer results than letters")
    rules: list[Rule] = []
    for effective_on, result in zip(effective_ons, results):
        effect = find_mark_from_char(result)
        if effect is None:
            continue
        rules.extend(parse_toneless_rule(key, effective_on, result, effect))
    appending = _appending_rule(key, tail)
    if appending is not None:
        rules.append(appending)
    return rules


def parse_toneless_rule(key: str, effective_on: str, result: str, effect: Mark) -> list[Rule]:
    """Build the mark rules that turn each letter of a family into `result`.

    The rule on `result` itself undoes the mark; vowels get one rule per tone.
    """
    rules: list[Rule] = []
    for member in get_mark_family(effective_on):
        if member == result:
            rules.append(
                Rule(
                    key=key,
                    effect_type=EffectType.MARK_TRANSFORMATION,
                    effect=0,
                    effect_on=result,
                    result=effective_on,
                )
            )
        elif is_vowel(member):
            rules.extend(
                Rule(
                    key=key,
                    effect_type=EffectType.MARK_TRANSFORMATION,
                    effect=int(effect),
                    effect_on=add_tone_to_char(member, tone),
                    result=add_tone_to_char(result, tone),
                )
                for tone in Tone
            )
        else:
            rules.append(
                Rule(
                    key=key,
                    effect_type=EffectType.MARK_TRANSFORMATION,
                    effect=int(effect),
                    effect_on=member,
                    result=result,
                )
            )
    return rules


def _appending_rule(key: str, value: str) -> Rule | None:
    match = _DSL_APPENDING.search(value)
    if match is None:
        return None
    chars = match.group(2)
    appended = tuple(
        Rule(key=key, effect_type=EffectType.APPENDING, effect_on=c, result=c) for c in chars[1:]
    )
    return Rule(
        key=key,
        effect_type=EffectType.APPENDING,
        effect_on=chars[0],
        result=chars[0],
        appended_rules=appended,
    )