"""Transformations typed so far and how they render to text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

from bamboo.chars import (
    Mark,
    Tone,
    add_mark_to_char,
    add_tone_to_char,
    remove_mark_from_char,
)
from bamboo.parser import VIRTUAL_KEY, EffectType, Rule


class Mode(IntFlag):
    """How a composition is rendered."""

    VIETNAMESE = 1
    ENGLISH = 2
    TONE_LESS = 4
    MARK_LESS = 8
    LOWER_CASE = 16


class EngineFlag(IntFlag):
    """Options of the typing engine."""

    FREE_TONE_MARKING = 1
    STD_TONE_STYLE = 2
    AUTO_CORRECT_ENABLED = 4
    STD = FREE_TONE_MARKING | STD_TONE_STYLE | AUTO_CORRECT_ENABLED


@dataclass(eq=False)
class Transformation:
    """A rule applied by one key stroke, possibly to an earlier transformation.

    Transformations compare by identity: targets refer to specific objects.
    """

    rule: Rule
    target: Transformation | None = None
    is_upper_case: bool = False


def flatten(composition: list[Transformation], mode: Mode) -> str:
    """Render a composition as text in the given mode."""
    english = bool(mode & Mode.ENGLISH)
    appending: list[Transformation] = []
    effects: dict[Transformation, list[Transformation]] = {}
    for trans in composition:
        if english:
            if trans.rule.key == VIRTUAL_KEY:
                continue
            appending.append(trans)
        elif trans.rule.effect_type == EffectType.APPENDING:
            appending.append(trans)
        elif trans.target is not None:
            effects.setdefault(trans.target, []).append(trans)
    return "".join(_render(trans, effects.get(trans, ()), mode) for trans in appending)


def _render(trans: Transformation, effects, mode: Mode) -> str:
    if mode & Mode.ENGLISH:
        chr = trans.rule.key
    else:
        chr = trans.rule.effect_on
        if mode & Mode.MARK_LESS and not ("a" <= chr <= "z"):
            chr = remove_mark_from_char(chr)
        for effect in effects:
            if effect.rule.effect_type == EffectType.MARK_TRANSFORMATION:
                if mode & Mode.MARK_LESS:
                    continue
                if effect.rule.effect == Mark.RAW:
                    chr = trans.rule.key
                else:
                    chr = add_mark_to_char(chr, effect.rule.effect)
            elif effect.rule.effect_type == EffectType.TONE_TRANSFORMATION:
                if mode & Mode.TONE_LESS:
                    continue
                chr = add_tone_to_char(chr, effect.rule.effect)
    if mode & Mode.TONE_LESS:
        chr = add_tone_to_char(chr, Tone.NONE)
    if mode & Mode.LOWER_CASE:
        chr = chr.lower()
    elif trans.is_upper_case:
        chr = chr.upper()
    return chr