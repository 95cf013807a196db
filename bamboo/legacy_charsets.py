"""Tables that spell each Vietnamese letter in legacy charsets and escapes.

Tables of byte charsets hold the bytes as they read in Windows-1252, so a
table value is the text a program sees when it shows those bytes as
Windows-1252.
"""

from __future__ import annotations

import unicodedata

from bamboo.chars import (
    Mark,
    Tone,
    add_tone_to_char,
    find_mark_from_char,
    find_tone_from_char,
    remove_mark_from_char,
)

_LOWER_GROUPS = (
    "đâăêôơư",
    "áàảãạ",
    "ấầẩẫậ",
    "ắằẳẵặ",
    "éèẻẽẹ",
    "ếềểễệ",
    "íìỉĩị",
    "óòỏõọ",
    "ốồổỗộ",
    "ớờởỡợ",
    "úùủũụ",
    "ứừửữự",
    "ýỳỷỹỵ",
)

_LOWER_LETTERS = "".join(_LOWER_GROUPS)

# Every letter a table covers: the lower case letters, then the upper case ones.
VIETNAMESE_LETTERS = _LOWER_LETTERS + _LOWER_LETTERS.upper()


def _table(text: str) -> dict[str, str]:
    """Pair whitespace-separated values with VIETNAMESE_LETTERS, in order."""
    values = text.split()
    if len(values) != len(VIETNAMESE_LETTERS):
        raise ValueError(
            f"table has {len(values)} values, expected {len(VIETNAMESE_LETTERS)}"
        )
    return dict(zip(VIETNAMESE_LETTERS, values))


def _cp1252_text(data: bytes) -> str:
    """Read bytes as Windows-1252; bytes it leaves undefined keep their value."""
    chars = []
    for byte in data:
        try:
            chars.append(bytes([byte]).decode("cp1252"))
        except UnicodeDecodeError:
            chars.append(chr(byte))
    return "".join(chars)


_VIQR_MARKS = {
    Mark.NONE: "",
    Mark.HAT: "^",
    Mark.BREVE: "(",
    Mark.HORN: "+",
    Mark.DASH: "d",
}

_VIQR_TONES = {
    Tone.NONE: "",
    Tone.GRAVE: "`",
    Tone.ACUTE: "'",
    Tone.HOOK: "?",
    Tone.TILDE: "~",
    Tone.DOT: ".",
}


def _viqr(letter: str) -> str:
    lower = letter.lower()
    tone = find_tone_from_char(lower)
    untoned = add_tone_to_char(lower, Tone.NONE)
    mark = find_mark_from_char(untoned)
    base = remove_mark_from_char(untoned)
    text = base + _VIQR_MARKS.get(mark, "") + _VIQR_TONES[tone]
    return text.upper() if letter.isupper() else text


_TCVN3 = _table(
    """
    ® © ¨ ª « ¬ \xad
    ¸ µ ¶ · ¹
    Ê Ç È É Ë
    ¾ » ¼ ½ Æ
    Ð Ì Î Ï Ñ
    Õ Ò Ó Ô Ö
    Ý × Ø Ü Þ
    ã ß á â ä
    è å æ ç é
    í ê ë ì î
    ó ï ñ ò ô
    ø õ ö ÷ ù
    ý ú û ü þ
    § ¢ ¡ £ ¤ ¥ ¦
    ¸ µ ¶ · ¹
    Ê Ç È É Ë
    ¾ » ¼ ½ Æ
    Ð Ì Î Ï Ñ
    Õ Ò Ó Ô Ö
    Ý × Ø Ü Þ
    ã ß á â ä
    è å æ ç é
    í ê ë ì î
    ó ï ñ ò ô
    ø õ ö ÷ ù
    ý ú û ü þ
    """
)

_VNI_WINDOWS = _table(
    """
    ñ aâ aê eâ oâ ô ö
    aù aø aû aõ aï
    aá aà aå aã aä
    aé aè aú aü aë
    eù eø eû eõ eï
    eá eà eå eã eä
    í ì æ ó ò
    où oø oû oõ oï
    oá oà oå oã oä
    ôù ôø ôû ôõ ôï
    uù uø uû uõ uï
    öù öø öû öõ öï
    yù yø yû yõ î
    Ñ AÂ AÊ EÂ OÂ Ô Ö
    AÙ AØ AÛ AÕ AÏ
    AÁ AÀ AÅ AÃ AÄ
    AÉ AÈ AÚ AÜ AË
    EÙ EØ EÛ EÕ EÏ
    EÁ EÀ EÅ EÃ EÄ
    Í Ì Æ Ó Ò
    OÙ OØ OÛ OÕ OÏ
    OÁ OÀ OÅ OÃ OÄ
    ÔÙ ÔØ ÔÛ ÔÕ ÔÏ
    UÙ UØ UÛ UÕ UÏ
    ÖÙ ÖØ ÖÛ ÖÕ ÖÏ
    YÙ YØ YÛ YÕ Î
    """
)

_WINDOWS_1258 = _table(
    """
    ð â ã ê ô õ ý
    aì aÌ aÒ aÞ aò
    âì âÌ âÒ âÞ âò
    ãì ãÌ ãÒ ãÞ ãò
    eì eÌ eÒ eÞ eò
    êì êÌ êÒ êÞ êò
    iì iÌ iÒ iÞ iò
    oì oÌ oÒ oÞ oò
    ôì ôÌ ôÒ ôÞ ôò
    õì õÌ õÒ õÞ õò
    uì uÌ uÒ uÞ uò
    ýì ýÌ ýÒ ýÞ ýò
    yì yÌ yÒ yÞ yò
    Đ Â Ã Ê Ô Õ Ý
    Aì AÌ AÒ AÞ Aò
    Âì ÂÌ ÂÒ ÂÞ Âò
    Ãì ÃÌ ÃÒ ÃÞ Ãò
    Eì EÌ EÒ EÞ Eò
    Êì ÊÌ ÊÒ ÊÞ Êò
    Iì IÌ IÒ IÞ Iò
    Oì OÌ OÒ OÞ Oò
    Ôì ÔÌ ÔÒ ÔÞ Ôò
    Õì ÕÌ ÕÒ ÕÞ Õò
    Uì UÌ UÒ UÞ Uò
    =Ýì ÝÌ ÝÒ ÝÞ Ýò
    Yì YÌ YÒ YÞ Yò
    """
)

_VISCII = _table(
    """
    ð â å ê ô ½ ß
    á à ä ã Õ
    ¤ ¥ ¦ ç §
    ¡ ¢ Æ Ç £
    é è ë ¨ ©
    ª « ¬ \xad ®
    í ì ï î ¸
    ó ò ö õ ÷
    ¯ ° ± ² µ
    ¾ ¶ · Þ þ
    ú ù ü û ø
    Ñ × Ø æ ñ
    ý Ï Ö Û Ü
    Ð Â Å Ê Ô ´ ¿
    Á À Ä Ã €
    „ … † ç ‡
    \x81 ‚ Æ Ç ƒ
    É È Ë ˆ ‰
    Š ‹ Œ \x8d Ž
    Í Ì › Î ˜
    Ó Ò ™ õ š
    \x8f \x90 ‘ ’ “
    • – — ³ ”
    Ú Ù œ \x9d ž
    º » ¼ ÿ ¹
    Ý Ÿ Ö Û Ü
    """
)

_VPS = _table(
    """
    Ç â æ ê ô Ö Ü
    á à ä ã å
    Ã À Ä Å Æ
    ¡ ¢ £ ¤ ¥
    é è È ë Ë
    ‰ Š ‹ Í Œ
    í ì Ì ï Î
    ó ò Õ õ †
    Ó Ò ° ‡ ¶
    § © ª « ®
    ú ù û Û ø
    Ù Ø º » ¿
    š ÿ › Ï œ
    ñ Â ˆ Ê Ô ÷ Ð
    Á € \x81 ‚ å
    ƒ „ … Å Æ
    \x8d Ž \x8f ð ¥
    É × Þ þ Ë
    \x90 “ ” • Œ
    ´ µ · ¸ Î
    ¹ ¼ ½ ¾ †
    – — ˜ ™ ¶
    \x9d ž Ÿ ¦ ®
    Ú ¨ Ñ ¬ ø
    \xad ¯ ± » ¿
    Ý ² ý ³ œ
    """
)

_BKHCM_2 = _table(
    """
    à ê ù ï ö ú û
    aá aâ aã aä aå
    êë êì êí êî êå
    ùæ ùç ùè ùé ùå
    eá eâ eã eä eå
    ïë ïì ïí ïî ïå
    ñ ò ó ô õ
    oá oâ oã oä oå
    öë öì öí öî öå
    úá úâ úã úä úå
    uá uâ uã uä uå
    ûá ûâ ûã ûä ûå
    yá yâ yã yä yå
    À Ê Ù Ï Ö Ú Û
    AÁ AÂ AÃ AÄ AÅ
    ÊË ÊÌ ÊÍ ÊÎ ÊÅ
    ÙÆ ÙÇ ÙÈ ÙÉ ÙÅ
    EÁ EÂ EÃ EÄ EÅ
    ÏË ÏÌ ÏÍ ÏÎ Ïå
    Ñ Ò Ó Ô Õ
    OÁ OÂ OÃ OÄ OÅ
    ÖË ÖÌ ÖÍ ÖÎ ÖÅ
    ÚÁ ÚÂ ÚÃ ÚÄ ÚÅ
    UÁ UÂ UÃ UÄ UÅ
    ÛÁ ÛÂ ÛÃ ÛÄ ÛÅ
    YÁ YÂ YÃ YÄ YÅ
    """
)

_BKHCM_1 = _table(
    """
    ½ Ý × ã é ï õ
    ¾ ¿ À Á Â
    Þ ß à á â
    Ø Ù Ú Û Ü
    Ã Ä Å Æ Ç
    ä å æ ç è
    È É Ê Ë Ì
    Í Î Ï Ð Ñ
    ê ë ì í î
    ð ñ ò ó ô
    Ò Ó Ô Õ Ö
    ö ÷ ø ù ú
    û ü ý þ ÿ
    } Ÿ ™ ¥ « ± ·
    € \x81 ‚ ƒ „
    ~ ¡ ¢ £ ¤
    š › œ \x9d ˜
    … † ‡ ˆ ‰
    ¦ § ¨ © ª
    Š ‹ Œ \x8d Ž
    \x8f \x90 ‘ ’ “
    ¬ \xad ® ¯ °
    ² ³ ´ µ ¶
    ” • – — ˜
    ¸ ¹ º » ¼
    { ^ ` | Ž
    """
)

_VIETWARE_X = _table(
    """
    â á à ã ä å æ
    aï aì aí aî aû
    áú áö áø áù áû
    àõ àò àó àô àû
    eï eì eí eî eû
    ãú ãö ãø ãù ãû
    ê ç è é ë
    oï oì oí oî oü
    äú äö äø äù äü
    åï åì åí åî åü
    uï uì uí uî uû
    æï æì æí æî æû
    yï yì yí yî yñ
    Â Á À Ã Ä Å Æ
    AÏ AÌ AÍ AÎ AÛ
    ÁÚ ÁÖ ÁØ ÁÙ ÁÛ
    ÀÕ ÀÒ ÀÓ ÀÔ ÀÛ
    EÏ EÌ EÍ EÎ EÛ
    ÃÚ ÃÖ ÃØ ÃÙ ÃÛ
    Ê Ç È É Ë
    OÏ OÌ OÍ OÎ OÜ
    ÄÚ ÄÖ ÄØ ÄÙ ÄÜ
    ÅÏ ÅÌ ÅÍ ÅÎ ÅÜ
    UÏ UÌ UÍ UÎ UÛ
    ÆÏ ÆÌ ÆÍ ÆÎ ÆÛ
    YÏ YÌ YÍ YÎ YÑ
    """
)

_VIETWARE_FULL = _table(
    """
    ¢ ¡ Ÿ £ ¤ ¥ §
    À ª ¶ º Á
    Ê Ç È É Ë
    Å Â Ã Ä Æ
    Ï Ì Í Î Ñ
    Õ Ò Ó Ô Ö
    Û Ø Ù Ú Ü
    â ß à á ã
    ç ä å æ è
    ì é ê ë í
    ò î ï ñ ó
    ÷ ô õ ö ø
    ü ù ú û ÿ
    ˜ — – ™ š › œ
    À ª ¶ º Á
    Ê Ç È É Ë
    Å Â Ã Ä Æ
    Ï Ì Í Î Ñ
    Õ Ò Ó Ô Ö
    Û Ø Ù Ú Ü
    â ß à á ã
    ç ä å æ è
    ì é ê ë í
    ò î ï ñ ó
    ÷ ô õ ö ø
    ü ù ú û ÿ
    """
)

CHARSET_DEFINITIONS: dict[str, dict[str, str]] = {
    "TCVN3 (ABC)": _TCVN3,
    "VNI Windows": _VNI_WINDOWS,
    "Unicode tổ hợp": {c: unicodedata.normalize("NFD", c) for c in VIETNAMESE_LETTERS},
    "Windows 1258 codepage": _WINDOWS_1258,
    "VIQR": {c: _viqr(c) for c in VIETNAMESE_LETTERS},
    "VISCII": _VISCII,
    "VPS": _VPS,
    "BKHCM 2": _BKHCM_2,
    "BKHCM 1": _BKHCM_1,
    "Vietware X": _VIETWARE_X,
    "Vietware Full": _VIETWARE_FULL,
    "UTF-8": {c: _cp1252_text(c.encode("utf-8")) for c in VIETNAMESE_LETTERS},
    "NCR Decimal": {c: f"&#{ord(c)};" for c in VIETNAMESE_LETTERS},
    # Letters of Latin-1 are left as they are.
    "NCR Hex": {c: f"&#x{ord(c):X};" for c in VIETNAMESE_LETTERS if ord(c) > 0xFF},
    "Unicode C string Hex": {c: f"\\x{ord(c):X}" for c in VIETNAMESE_LETTERS},
    "Unicode C string Decimal": {c: f"\\u{ord(c)}" for c in VIETNAMESE_LETTERS},
}