# bamboo

A Vietnamese input method engine. It turns key strokes typed with Telex,
VNI, VIQR and related layouts into Vietnamese text, places tones on the
vowel that Vietnamese spelling expects, checks syllables against a
built-in spelling trie, and re-encodes text into legacy Vietnamese
charsets and escape notations.

## Installing

```
pip install .
```

The package has no runtime dependencies. Python 3.10 or later is required.

## Typing with the engine

```python
from bamboo.parser import INPUT_METHOD_DEFINITIONS, parse_input_method
from bamboo.engine import BambooEngine
from bamboo.composition import Mode, EngineFlag

input_method = parse_input_method(INPUT_METHOD_DEFINITIONS, "Telex 2")
engine = BambooEngine(input_method, EngineFlag.STD)

engine.process_string("chuaarn", Mode.VIETNAMESE)
engine.get_processed_string(Mode.VIETNAMESE)   # "chuẩn"
engine.get_processed_string(Mode.ENGLISH)      # "chuaarn"

engine.reset()
engine.process_string("duwongwj tooi", Mode.VIETNAMESE)
engine.restore_last_word()
engine.get_processed_string(Mode.VIETNAMESE)   # "tooi"
```

`INPUT_METHOD_DEFINITIONS` holds the bundled layouts: "Telex", "Telex 2",
"Telex 3", "VNI", "VIQR", "Microsoft layout", "Telex + VNI",
"Telex + VNI + VIQR" and "VNI Bàn phím tiếng Pháp". Each maps a key to a
definition line such as `"DauSac"` (acute tone), `"UOA_ƯƠĂ"` (horn or
breve marks) or `"__ư"` (type a letter directly). `parse_input_method`
returns an `InputMethod` with its `rules`, `keys`, `tone_keys` and
`super_keys`; an unknown name gives an empty one. `parse_input_methods`
parses every layout at once, and `parse_rules` parses a single line.

Engine methods:

- `can_process_key(key)` – whether the key is an ASCII letter or one of
  the input method's keys.
- `process_key(key, mode)` / `process_string(text, mode)` – feed key
  strokes; `mode` defaults to `Mode.VIETNAMESE`, and `Mode.ENGLISH`
  appends keys as they are.
- `get_processed_string(mode)` – the last word rendered in `mode`
  (`Mode` flags may be combined: `TONE_LESS`, `MARK_LESS`, `LOWER_CASE`).
- `remove_last_char()` – backspace, dropping the last letter and every
  effect on it.
- `restore_last_word()` – turn the last word back into the keys typed.
- `get_raw_string()` – every key typed so far.
- `get_spelling_match_result(mode, dictionary)` – a `FindResult` for the
  last word: `NOT_MATCH`, `MATCH_PREFIX` or `MATCH_FULL`.
- `reset()` – forget everything typed.

`EngineFlag` has `FREE_TONE_MARKING`, `STD_TONE_STYLE`,
`AUTO_CORRECT_ENABLED` and `STD` (all three). Without
`STD_TONE_STYLE` the tone follows the older placement ("choá" rather
than "chóa").

The lower-level building blocks are public too: `Transformation` and
`flatten(composition, mode)` in `bamboo.composition`, and the functions of
`bamboo.transform` (`generate_transformations`, `find_target`,
`find_tone_target`, `get_last_word`, `extract_last_syllable`, and so on).

## Characters and spelling

`bamboo.chars` holds the helpers for Vietnamese letters: `is_vowel`,
`add_tone_to_char`, `add_mark_to_char`, `find_tone_from_char`,
`find_mark_from_char`, `remove_mark_from_char`, `remove_tone_from_word`,
`has_vietnamese_char`, `is_word_break_symbol`, together with the `Tone`
and `Mark` enums.

```python
from bamboo.chars import Mark, Tone, add_mark_to_char, add_tone_to_char

add_tone_to_char("a", Tone.DOT)      # "ạ"
add_mark_to_char("ạ", Mark.BREVE)    # "ặ"
```

`bamboo.spelling` builds the list of valid tone-less syllables
(`generate_dictionary()`), classifies the letters of a word into
consonant and vowel sounds (`parse_sounds_from_word`,
`parse_dump_sounds_from_word`), and adds words of your own to the shared
spelling trie with `add_dictionary_to_spelling_trie({"đắk": True})` (any
iterable of words will do).

`bamboo.trie` is the trie itself: `Node`, `add_trie`, `match_string`,
`find_node` and `find_words`.

## Legacy charsets

```python
from bamboo.encoder import encode, get_charset_names

get_charset_names()            # ["Unicode", "TCVN3 (ABC)", "VNI Windows", "Unicode tổ hợp", ...]
encode("VIQR", "Việt")         # "Vie^.t"
encode("NCR Decimal", "đ")     # "&#273;"
```

Characters a charset has no entry for pass through unchanged, and
"Unicode" or an unknown charset name returns the text as it is. The
tables live in `bamboo.legacy_charsets.CHARSET_DEFINITIONS`; byte
charsets are written as the text their bytes show in Windows-1252.

## What it does not do

This is a library only. It does not hook into any desktop input
framework, has no command to run, and does not load word lists from
files; words reach the spelling trie only through
`add_dictionary_to_spelling_trie`.

## Running the tests

```
pip install .[test]
pytest
```