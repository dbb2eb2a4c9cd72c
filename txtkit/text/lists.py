"""
Newline separated lists.

Whitespace around each line is stripped, empty lines are ignored, and lines
starting with `#` are treated as comments and dropped.
"""

from typing import List


def list_to_string_list(text: str) -> List[str]:
    """
    Take a newline separated list and return the list of its entries.

    >>> list_to_string_list("name1\\n  # comment\\n\\n  name2  \\nname3")
    ['name1', 'name2', 'name3']
    """
    lines = (line.strip() for line in text.split("\n"))
    return [line for line in lines if line and not line.startswith("#")]


def sep_list_to_string_list(text: str, sep: str) -> List[str]:
    """
    Same as `list_to_string_list`, but every entry is split again on `sep`.
    Pieces are stripped and empty pieces are dropped.

    >>> sep_list_to_string_list("a, b,,\\n# c, d\\ne ,f", ",")
    ['a', 'b', 'e', 'f']
    """
    if not sep:
        raise ValueError("sep must not be empty")
    pieces = (piece.strip() for line in list_to_string_list(text) for piece in line.split(sep))
    return [piece for piece in pieces if piece]


def list_to_sep_string(text: str, sep: str) -> str:
    """
    Take a newline separated list and return a single string joined with `sep`.

    >>> list_to_sep_string("name1\\nname2\\nname3", "; ")
    'name1; name2; name3'
    """
    return sep.join(list_to_string_list(text))
