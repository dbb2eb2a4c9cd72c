"""
Decoding of `\\uHHHH` escape sequences left in text, e.g. by a JSON encoder.
"""

import re

_ESCAPE_PAT = re.compile(
    r"\\u(?P<high>[dD][89abAB][0-9a-fA-F]{2})\\u(?P<low>[dD][c-fC-F][0-9a-fA-F]{2})"
    r"|\\u(?P<code>[0-9a-fA-F]{4})"
)
_REPLACEMENT_CHARACTER = "\ufffd"


def _decode(match: "re.Match[str]") -> str:
    if match.group("code") is None:
        high = int(match.group("high"), 16)
        low = int(match.group("low"), 16)
        return chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00))

    code_point = int(match.group("code"), 16)
    if 0xD800 <= code_point <= 0xDFFF:
        # lone surrogate
        return _REPLACEMENT_CHARACTER
    return chr(code_point)


def fix_unicode_escaped_text(text: str) -> str:
    r"""
    Convert escaped Unicode characters `\uHHHH` in a string to the actual characters.
    Escapes without four hex digits are left as they are.

    A surrogate pair written as two escapes is combined into one character,
    a lone surrogate becomes U+FFFD.

    >>> fix_unicode_escaped_text(r"BlahCo\u2122")
    'BlahCo™'
    >>> fix_unicode_escaped_text(r"\u00e9t\u00e9 \uZZZZ")
    'été \\uZZZZ'
    """
    return _ESCAPE_PAT.sub(_decode, text)
