import html
import unicodedata

import pytest

from bamboo.encoder import UNICODE, encode, get_charset_names
from bamboo.legacy_charsets import CHARSET_DEFINITIONS, VIETNAMESE_LETTERS

SAMPLE = "Tiếng Việt có dấu: đường, Ưng, ỹ"


def test_unicode_passes_text_through():
    assert encode(UNICODE, SAMPLE) == SAMPLE


def test_unknown_charset_passes_text_through():
    assert encode("No such charset", SAMPLE) == SAMPLE


def test_empty_text_encodes_to_empty_string():
    for name in get_charset_names():
        assert encode(name, "") == ""


def test_ncr_decimal_letters_from_table():
    assert encode("NCR Decimal", "đ") == "&#273;"
    assert encode("NCR Decimal", "Ỵ") == "&#7924;"


def test_viqr_letters_from_table():
    assert encode("VIQR", "ệ") == "e^."
    assert encode("VIQR", "Đ") == "DD"
    assert encode("VIQR", "ợ") == "o+."


def test_tcvn3_letter_from_table():
    assert encode("TCVN3 (ABC)", "đ") == "®"


def test_unicode_c_string_hex_from_table():
    assert encode("Unicode C string Hex", "ả") == "\\x1EA3"


def test_plain_ascii_is_kept_in_every_charset():
    text = "abc xyz 123"
    for name in get_charset_names():
        assert encode(name, text) == text


def test_unmapped_characters_are_kept_between_mapped_ones():
    table = CHARSET_DEFINITIONS["VNI Windows"]
    assert encode("VNI Windows", "xđy") == "x" + table["đ"] + "y"


@pytest.mark.parametrize("name", ["NCR Decimal", "NCR Hex"])
def test_ncr_round_trip(name):
    assert html.unescape(encode(name, SAMPLE)) == SAMPLE


def test_combining_unicode_round_trip():
    encoded = encode("Unicode tổ hợp", SAMPLE)
    assert unicodedata.normalize("NFC", encoded) == SAMPLE


def test_encoding_is_letterwise_concatenation():
    for name, table in CHARSET_DEFINITIONS.items():
        expected = "".join(table.get(c, c) for c in VIETNAMESE_LETTERS)
        assert encode(name, VIETNAMESE_LETTERS) == expected


def test_charset_names_start_with_unicode():
    names = get_charset_names()
    assert names[0] == UNICODE


def test_charset_names_cover_all_definitions_once():
    names = get_charset_names()
    assert len(names) == len(set(names))
    assert set(names) == {UNICODE, *CHARSET_DEFINITIONS}
    assert len(names) == 17


def test_every_listed_name_changes_or_keeps_text_consistently():
    for name in get_charset_names()[1:]:
        assert encode(name, "đ") == CHARSET_DEFINITIONS[name].get("đ", "đ")