"""
Latin-1 to Unicode character remapping.

Bytes 0x80..0x9F are C1 control codes in ISO-8859-1, but text produced on
Windows uses them for the Windows-1252 punctuation below. Slots Windows-1252
leaves unassigned, DEL (0x7F) and the soft hyphen (0xAD) become ``-``.
"""

from typing import Dict, Union

# fmt: off
_C1_TABLE = (
    # 0x80    0x81    0x82    0x83    0x84    0x85    0x86    0x87
    # €       -       ‚       ƒ       „       …       †       ‡
    0x20AC, 0x002D, 0x201A, 0x0192, 0x201E, 0x2026, 0x2020, 0x2021,
    # 0x88    0x89    0x8a    0x8b    0x8c    0x8d    0x8e    0x8f
    # ˆ       ‰       Š       ‹       Œ       -       Ž       -
    0x02C6, 0x2030, 0x0160, 0x2039, 0x0152, 0x002D, 0x017D, 0x002D,
    # 0x90    0x91    0x92    0x93    0x94    0x95    0x96    0x97
    # -       ‘       ’       “       ”       •       –       —
    0x002D, 0x2018, 0x2019, 0x201C, 0x201D, 0x2022, 0x2013, 0x2014,
    # 0x98    0x99    0x9a    0x9b    0x9c    0x9d    0x9e    0x9f
    # ˜       ™       š       ›       œ       -       ž       Ÿ
    0x02DC, 0x2122, 0x0161, 0x203A, 0x0153, 0x002D, 0x017E, 0x0178,
)
# fmt: on

LATIN1_TRANSLATION: Dict[int, int] = {0x80 + i: cp for i, cp in enumerate(_C1_TABLE)}
LATIN1_TRANSLATION[0x7F] = ord("-")
LATIN1_TRANSLATION[0xAD] = ord("-")


def latin1_runeize(data: Union[bytes, bytearray, str]) -> str:
    """
    Convert Latin-1 text to its Unicode equivalent, one character per input unit.

    `bytes` are read one byte per character, they are never decoded as UTF-8.
    For `str` input each character is treated as one unit, so characters outside
    the remapped range pass through unchanged.

    >>> latin1_runeize(b"\\x93quoted\\x94 \\x80 5")
    '“quoted” € 5'
    >>> latin1_runeize("soft\\xadhyphen")
    'soft-hyphen'
    """
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode("latin-1")
    return data.translate(LATIN1_TRANSLATION)
