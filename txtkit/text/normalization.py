"""
Space cleanup and trailing zero trimming of decimal numerals.
"""

import re

_SPACE_RUN_PAT = re.compile(r" {2,}")


def clean_spaces(text: str) -> str:
    """
    Collapse runs of spaces into a single space and strip surrounding whitespace.
    Only U+0020 is collapsed, tabs and newlines inside the text are kept.

    >>> clean_spaces("  a   b  ")
    'a b'
    >>> clean_spaces("a \\t  b")
    'a \\t b'
    """
    return _SPACE_RUN_PAT.sub(" ", text).strip()


def trim_dot0s(numeral: str) -> str:
    """
    Remove trailing zeros of a decimal numeral, and the dot if nothing is left after it.
    `-0` is normalized to `0`.

    >>> trim_dot0s("3.20000")
    '3.2'
    >>> trim_dot0s("3.00000")
    '3'
    >>> trim_dot0s("300")
    '300'
    >>> trim_dot0s("-0.0000")
    '0'
    """
    if "." in numeral:
        numeral = numeral.rstrip("0").rstrip(".")
    if numeral == "-0":
        numeral = "0"
    return numeral


def flt_trim_dot0s(value: float) -> str:
    """
    Format a float with six fractional digits and trim the trailing zeros.

    >>> flt_trim_dot0s(2.5)
    '2.5'
    >>> flt_trim_dot0s(-0.0000001)
    '0'
    """
    return trim_dot0s(f"{value:f}")
