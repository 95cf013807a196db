import pytest

from bamboo.composition import EngineFlag, Mode
from bamboo.engine import BambooEngine
from bamboo.parser import INPUT_METHOD_DEFINITIONS, parse_input_method
from bamboo.spelling import add_dictionary_to_spelling_trie
from bamboo.trie import FindResult

VIE = Mode.VIETNAMESE
ENG = Mode.ENGLISH


def make_engine(name="Telex 2", flags=EngineFlag.STD):
    return BambooEngine(parse_input_method(INPUT_METHOD_DEFINITIONS, name), flags)


@pytest.fixture
def ng():
    return make_engine()


def test_process_string(ng):
    ng.process_string("aw", VIE)
    assert ng.get_processed_string(VIE) == "ă"
    ng.reset()
    ng.process_string("uw", VIE)
    ng.process_string("o", VIE)
    ng.process_string("w", VIE)
    assert ng.get_processed_string(VIE) == "ươ"
    ng.reset()
    ng.process_string("chuaarn", VIE)
    assert ng.get_processed_string(VIE) == "chuẩn"
    ng.reset()
    ng.process_string("giamaf", VIE)
    assert ng.get_processed_string(VIE) == "giầm"


def test_process_dd_string(ng):
    ng.process_string("dd", VIE)
    assert ng.get_spelling_match_result(Mode.TONE_LESS, False) != FindResult.NOT_MATCH
    ng.reset()
    ng.process_string("ddafi", VIE)
    assert ng.get_processed_string(VIE) == "đài"


def test_process_muoiwq(ng):
    ng.process_string("Muoiwq", VIE)
    assert ng.get_processed_string(ENG) == "Muoiwq"
    ng.reset()
    ng.process_string("mootj", VIE)
    assert ng.get_processed_string(VIE) == "một"


def test_process_thuow(ng):
    ng.process_string("Thuow", VIE)
    assert ng.get_processed_string(VIE) == "Thuơ"
    ng.remove_last_char()
    assert ng.get_processed_string(VIE) == "Thu"


def test_engine_remove_last_char(ng):
    ng.remove_last_char()
    ng.process_string(" ", ENG)
    ng.remove_last_char()
    ng.process_string("loanj", VIE)
    assert ng.get_processed_string(VIE) == "loạn"
    ng.remove_last_char()
    assert ng.get_processed_string(VIE) == "lọa"
    ng.process_string(":", ENG)
    ng.remove_last_char()
    assert ng.get_processed_string(VIE) == "lọa"


def test_process_upper_string(ng):
    ng.process_string("VIEETJ", VIE)
    assert ng.get_processed_string(VIE) == "VIỆT"
    ng.remove_last_char()
    assert ng.get_processed_string(VIE) == "VIỆ"
    ng.process_key("Q", VIE)
    assert ng.get_processed_string(ENG) == "VIEEJQ"
    ng.reset()
    ng.process_string("IB", ENG)
    assert ng.get_processed_string(ENG) == "IB"


def test_spelling_check(ng):
    ng.process_string("noww", VIE)
    assert ng.get_processed_string(ENG) == "noww"
    assert ng.get_processed_string(VIE) == "now"
    ng.reset()
    ng.process_string("sawss", VIE)
    assert ng.get_processed_string(ENG) == "sawss"
    ng.reset()
    ng.process_string("sawss", VIE)
    assert ng.get_processed_string(VIE) == "săs"


def test_process_dd(ng):
    ng.process_string("dd", VIE)
    assert ng.get_spelling_match_result(Mode.TONE_LESS, False) != FindResult.NOT_MATCH
    assert ng.get_processed_string(VIE) == "đ"
    ng.reset()
    ng.process_string("SD", VIE)
    ng.process_string("D", VIE)
    assert ng.get_processed_string(VIE) == "SĐ"


def test_telex3():
    ng = make_engine("Telex 3")
    ng.process_string("[", VIE)
    assert ng.get_processed_string(VIE) == "ươ"
    ng.reset()
    ng.process_string("{", VIE)
    assert ng.get_processed_string(VIE) == "ƯƠ"


def test_process_wowfi(ng):
    ng.process_string("wowfi", VIE)
    assert ng.get_processed_string(VIE) == "ười"


def test_remove_last_char_hanhj(ng):
    ng.process_string("hanhj", VIE)
    ng.remove_last_char()
    assert ng.get_processed_string(VIE) == "hạn"


def test_process_catr(ng):
    ng.process_string("catr", VIE)
    assert ng.get_processed_string(VIE) == "catr"


def test_process_toowi(ng):
    ng.process_string("toowi", VIE)
    assert ng.get_processed_string(VIE) == "tơi"


def test_process_aloo(ng):
    ng.process_string("aloo", VIE)
    assert ng.get_processed_string(VIE) == "alô"


def test_spelling_check_for_giw(ng):
    ng.process_string("giw", VIE)
    assert ng.get_processed_string(VIE) == "giư"
    assert ng.get_spelling_match_result(Mode.TONE_LESS, False) == FindResult.MATCH_FULL


def test_double_brackets(ng):
    ng.process_string("[[", VIE)
    assert ng.get_processed_string(ENG) == "["


def test_double_tone_keys(ng):
    ng.process_string("tooss", VIE)
    assert ng.get_processed_string(VIE) == "tôs"
    ng.reset()
    ng.process_string("tosos", VIE)
    assert ng.get_processed_string(VIE) == "tôs"


def test_double_w(ng):
    ng.process_string("ww", VIE)
    assert ng.get_processed_string(ENG) == "w"
    assert ng.get_processed_string(VIE) == "w"


def test_double_w2(ng):
    ng.process_string("wiw", VIE)
    assert ng.get_processed_string(VIE) == "uiw"
    assert ng.get_processed_string(ENG) == "wiw"


def test_process_duwoi(ng):
    ng.process_string("duwoi", VIE)
    assert ng.get_processed_string(VIE) == "dươi"


def test_process_refresh(ng):
    ng.process_string("reff", VIE)
    ng.process_string("resh", ENG)
    assert ng.get_processed_string(ENG) == "reffresh"
    assert ng.get_processed_string(VIE) == "refresh"


def test_process_refresh2(ng):
    ng.process_string("reff", VIE)
    ng.remove_last_char()
    ng.process_key("f", VIE)
    assert ng.get_processed_string(VIE) == "rè"


def test_process_dd_seq(ng):
    ng.process_string("oddp", VIE)
    assert ng.get_processed_string(VIE) == "ođp"


def test_process_gisa(ng):
    ng.process_string("gisa", VIE)
    assert ng.get_processed_string(VIE) == "giá"


def test_process_kimso(ng):
    ng.process_string("kimso", VIE)
    assert ng.get_processed_string(VIE) == "kímo"


def test_process_to(ng):
    ng.process_string("to", VIE)
    assert ng.get_processed_string(VIE) == "to"
    assert ng.get_spelling_match_result(Mode.TONE_LESS, False) == FindResult.MATCH_FULL


def test_process_toorr(ng):
    ng.process_string("toorr", VIE)
    assert ng.get_processed_string(VIE) == "tôr"


def test_process_tnoss(ng):
    ng.process_string("tnoss", VIE)
    assert ng.get_processed_string(VIE) == "tnos"


def test_process_eenghf():
    ng = make_engine()
    add_dictionary_to_spelling_trie({"ềngh": True})
    ng.process_string("eenghf", VIE)
    assert ng.get_spelling_match_result(VIE | Mode.LOWER_CASE, True) == FindResult.MATCH_FULL
    assert ng.get_processed_string(VIE) == "ềngh"
    add_dictionary_to_spelling_trie({"đắk": True})
    ng.reset()
    ng.process_string("ddawks", VIE)
    assert ng.get_processed_string(VIE) == "đắk"


def test_process_hieeur(ng):
    ng.process_string("tooi oo HIEEUR", VIE)
    assert ng.get_processed_string(VIE) == "HIỂU"


def test_process_nguoiw(ng):
    ng.process_string("NGUOIW", VIE)
    assert ng.get_processed_string(VIE) == "NGƯƠI"


def test_process_brace_s(ng):
    ng.process_string("{s", VIE)
    assert ng.get_processed_string(VIE) == "Ớ"


def test_process_vni_o55():
    ng = make_engine("VNI")
    ng.process_string("o55", VIE)
    assert ng.get_processed_string(VIE) == "o5"


def test_process_duwongwj(ng):
    ng.process_string("duwongwj", VIE)
    assert ng.get_processed_string(VIE) == "duongwj"


def test_process_choas_without_std_tone_style():
    ng = make_engine(flags=EngineFlag.FREE_TONE_MARKING | EngineFlag.AUTO_CORRECT_ENABLED)
    ng.process_string("choas", VIE)
    assert ng.get_processed_string(VIE) == "choá"
    ng.reset()
    ng.process_string("bieecs", VIE)
    assert ng.get_processed_string(VIE) == "biếc"
    ng.reset()
    ng.process_string("uese", VIE)
    assert ng.get_processed_string(VIE) == "uế"


def test_engine_restore_last_word(ng):
    ng.process_string("duwongwj tooi", VIE)
    ng.restore_last_word()
    assert ng.get_processed_string(VIE) == "tooi"


def test_engine_restore_last_word_microsoft_layout():
    ng = make_engine("Microsoft layout")
    ng.process_string("112", VIE)
    assert ng.get_processed_string(VIE) == "1â"
    ng.restore_last_word()
    assert ng.get_processed_string(ENG) == "12"
    ng.reset()
    ng.process_string("duwongwj t4i", VIE)
    ng.restore_last_word()
    assert ng.get_processed_string(VIE) == "t4i"


def test_engine_z_processing(ng):
    ng.process_string("loz", VIE)
    assert ng.get_processed_string(VIE) == "loz"
    ng.reset()
    ng.process_string("losz", VIE)
    assert ng.get_processed_string(VIE) == "lo"
    assert ng.get_processed_string(ENG) == "losz"


def test_restore_last_word_gives_back_typed_keys(ng):
    ng.process_string("afq", VIE)
    assert ng.get_raw_string() == "afq"
    ng.restore_last_word()
    assert ng.get_processed_string(ENG) == "afq"
    assert ng.get_processed_string(VIE) == "afq"


def test_process_vn_word(ng):
    ng.process_string("tôifs", VIE)
    assert ng.get_processed_string(VIE) == "tối"
    assert ng.get_processed_string(ENG) == "tôifs"
    ng.reset()
    ng.process_string("tốif", VIE)
    assert ng.get_processed_string(VIE) == "tồi"
    assert ng.get_processed_string(ENG) == "tốif"
    ng.reset()
    ng.process_string("tốiz", VIE)
    assert ng.get_processed_string(VIE) == "tôi"


def test_double_typing(ng):
    ng.process_string("linux", VIE)
    ng.process_string("x", VIE)
    assert ng.get_processed_string(VIE) == "linux"
    ng.reset()
    ng.process_string("buwo", VIE)
    ng.process_string("o", VIE)
    assert ng.get_processed_string(VIE) == "buô"
    ng.reset()
    ng.process_string("buowc", VIE)
    ng.process_string("o", VIE)
    assert ng.get_processed_string(VIE) == "buôc"
    ng.reset()
    ng.process_string("cuoiw", VIE)
    ng.process_string("o", VIE)
    assert ng.get_processed_string(VIE) == "cuôi"
    ng.reset()
    ng.process_string("ach", VIE)
    ng.process_string("a", VIE)
    assert ng.get_processed_string(VIE) == "acha"
    ng.reset()
    ng.process_string("nhuw", VIE)
    assert ng.get_processed_string(VIE) == "như"
    assert ng.get_spelling_match_result(VIE, False) == FindResult.MATCH_FULL
    add_dictionary_to_spelling_trie({"thứ": True})
    ng.reset()
    ng.process_string("thuw", VIE)
    assert ng.get_spelling_match_result(VIE, False) == FindResult.MATCH_FULL
    ng.reset()
    ng.process_string("thow", VIE)
    assert ng.get_spelling_match_result(VIE, False) == FindResult.MATCH_FULL
    ng.reset()
    add_dictionary_to_spelling_trie({"tôi": True, "tối": True, "tời": True, "tơi": True})
    ng.process_string("tooi", VIE)
    assert ng.get_processed_string(VIE) == "tôi"
    assert ng.get_spelling_match_result(VIE, True) == FindResult.MATCH_FULL


def test_raw_string_keeps_typed_keys(ng):
    ng.process_string("chuaarn", VIE)
    assert ng.get_raw_string() == "chuaarn"


def test_reset_clears_composition(ng):
    ng.process_string("aw", VIE)
    ng.reset()
    assert ng.get_processed_string(VIE) == ""
    assert ng.get_raw_string() == ""
    assert ng.composition == ()


@pytest.mark.parametrize(
    ("key", "expected"),
    [("a", True), ("Z", True), ("[", True), ("1", False), (" ", False)],
)
def test_can_process_key(ng, key, expected):
    assert ng.can_process_key(key) is expected


def test_english_mode_appends_keys_verbatim(ng):
    ng.process_string("aws", ENG)
    assert ng.get_processed_string(VIE) == "aws"
    assert ng.get_raw_string() == "aws"


def test_processed_string_is_empty_after_word_break(ng):
    ng.process_string("viet ", VIE)
    assert ng.get_processed_string(VIE) == ""
    assert ng.get_raw_string() == "viet "