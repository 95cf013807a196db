"""The typing engine: turns key strokes into Vietnamese text."""

from __future__ import annotations

from dataclasses import replace

from bamboo.chars import is_alpha
from bamboo.composition import EngineFlag, Mode, Transformation, flatten
from bamboo.parser import VIRTUAL_KEY, InputMethod, Rule
from bamboo.transform import (
    UOH_UHO_TAIL,
    break_composition,
    extract_last_syllable,
    extract_last_word,
    find_last_appending_trans,
    find_target,
    generate_fallback_transformations,
    generate_transformations,
    get_last_word,
    get_spelling_match_result,
    new_appending_trans,
    refresh_last_tone_target,
)
from bamboo.trie import FindResult

_TONELESS_LOWER = Mode.TONE_LESS | Mode.LOWER_CASE


class BambooEngine:
    """Keeps the transformations typed so far and renders them as text."""

    def __init__(self, input_method: InputMethod, flags: int = EngineFlag.STD) -> None:
        self.input_method = input_method
        self.flags = int(flags)
        self._composition: list[Transformation] = []

    @property
    def composition(self) -> tuple[Transformation, ...]:
        """The transformations typed so far."""
        return tuple(self._composition)

    def _is_supported_key(self, key: str) -> bool:
        return is_alpha(key) or key in self.input_method.keys

    def _applicable_rules(self, key: str) -> list[Rule]:
        lower = key.lower()
        return [rule for rule in self.input_method.rules if rule.key == lower]

    def can_process_key(self, key: str) -> bool:
        """Return True if the key is a letter or one of the input method's keys."""
        return self._is_supported_key(key)

    def process_key(self, key: str, mode: Mode = Mode.VIETNAMESE) -> None:
        """Apply one key stroke to the last syllable."""
        lower_key = key.lower()
        is_upper_case = key.isupper()
        if mode & Mode.ENGLISH or not self._is_supported_key(lower_key):
            self._composition.append(new_appending_trans(lower_key, is_upper_case))
            return
        syllable, previous = extract_last_syllable(self._composition)
        syllable.extend(self._generate_transformations(syllable, lower_key, is_upper_case))
        self._composition = previous + syllable

    def process_string(self, text: str, mode: Mode = Mode.VIETNAMESE) -> None:
        """Apply every character of the text as a key stroke."""
        for key in text:
            self.process_key(key, mode)

    def _generate_transformations(
        self, composition: list[Transformation], lower_key: str, is_upper_case: bool
    ) -> list[Transformation]:
        rules = self._applicable_rules(lower_key)
        transformations = generate_transformations(
            composition, rules, self.flags, lower_key, is_upper_case
        )
        if not transformations:
            # No rule applies: the key appends a letter instead.
            transformations = generate_fallback_transformations(rules, lower_key, is_upper_case)
            virtual = self._apply_uow_shortcut([*composition, *transformations])
            if virtual is not None:
                transformations.append(virtual)
        # A tone may have to move to fit the new syllable: chuyr -> chuỷ, chuyrene -> chuyển
        transformations.extend(self._refresh_last_tone_target([*composition, *transformations]))
        return transformations

    def _apply_uow_shortcut(self, syllable: list[Transformation]) -> Transformation | None:
        super_keys = self.input_method.super_keys
        if not super_keys:
            return None
        if not UOH_UHO_TAIL.search(flatten(syllable, _TONELESS_LOWER)):
            return None
        target, rule = find_target(syllable, self._applicable_rules(super_keys[0]), self.flags)
        if target is None or rule is None:
            return None
        return Transformation(rule=replace(rule, key=VIRTUAL_KEY), target=target)

    def _refresh_last_tone_target(self, syllable: list[Transformation]) -> list[Transformation]:
        if (
            self.flags & EngineFlag.FREE_TONE_MARKING
            and get_spelling_match_result(syllable, _TONELESS_LOWER, False)
            != FindResult.NOT_MATCH
        ):
            return refresh_last_tone_target(
                syllable, bool(self.flags & EngineFlag.STD_TONE_STYLE)
            )
        return []

    def get_processed_string(self, mode: Mode = Mode.VIETNAMESE) -> str:
        """Render the last word in the given mode."""
        last_word = get_last_word(self._composition, self.input_method.keys)
        if not last_word:
            return ""
        return flatten(last_word, mode)

    def get_spelling_match_result(self, mode: Mode, dictionary: bool) -> FindResult:
        """Check the spelling of the last word."""
        return get_spelling_match_result(
            get_last_word(self._composition, self.input_method.keys), mode, dictionary
        )

    def get_raw_string(self) -> str:
        """Return the keys typed so far, without virtual ones."""
        return "".join(t.rule.key for t in self._composition)

    def remove_last_char(self) -> None:
        """Remove the last appended letter and every effect on it."""
        last_appending = find_last_appending_trans(self._composition)
        if last_appending is None:
            return
        if not self.can_process_key(last_appending.rule.key):
            self._composition.pop()
            return
        last_word, previous = extract_last_word(self._composition, self.input_method.keys)
        kept = [
            t
            for t in last_word
            if t.target is not last_appending and t is not last_appending
        ]
        kept.extend(self._refresh_last_tone_target(kept))
        self._composition = previous + kept

    def restore_last_word(self) -> None:
        """Turn the last word back into the keys that were typed."""
        last_word, previous = extract_last_word(self._composition, self.input_method.keys)
        if not last_word:
            return
        self._composition = previous + break_composition(last_word)

    def reset(self) -> None:
        """Forget everything typed so far."""
        self._composition = []