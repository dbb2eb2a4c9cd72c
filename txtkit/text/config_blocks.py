"""
Labeled blocks of configuration text.

Two kinds of blocks are recognized. Data blocks are wrapped in braces and may
name a separator character (one of ``,;:|/``) between the label and the brace:

    myLabel1 {
        data1.1
        # comments and empty lines are dropped
        data1.2
    }

    myLabel2 , {
        data2.1, data2.2
    }

Raw blocks are wrapped in angle brackets and keep their text untouched:

    block1<
    blah blah
    >

In both cases the closing character must be the first and only character of its
line. A block without such a closing line is not a block, and is skipped silently.
"""

import logging
import re
from os import PathLike
from typing import Callable, Iterator, NamedTuple, Union

from txtkit.text.lists import list_to_sep_string
from txtkit.utils.file_io import read_text

logger = logging.getLogger(__name__)

DATA_SEPARATORS = ",;:|/"

DATA_BLOCK_PAT = re.compile(
    r"^(\w+)\s*([" + re.escape(DATA_SEPARATORS) + r"]?)\s*\{(.*?)\n\}\n",
    re.MULTILINE | re.DOTALL | re.ASCII,
)
RAW_BLOCK_PAT = re.compile(r"^(\w+)\s*<(.*?)\n>\n", re.MULTILINE | re.DOTALL | re.ASCII)

BlockHandler = Callable[[str, str], None]


class ConfigBlock(NamedTuple):
    label: str
    body: str


def iter_config_data(text: str) -> Iterator[ConfigBlock]:
    """
    Yield the `{ ... }` data blocks of `text` from left to right.

    The body is cleaned with `list_to_sep_string(body, "\\n")`, then every occurrence
    of the separator given after the label is replaced with a newline.
    Pieces are not stripped again after the separator split.

    >>> list(iter_config_data("data1 {\\n a\\n b\\n}\\ndata2 ; {\\n x;y; z\\n}\\n"))
    [ConfigBlock(label='data1', body='a\\nb'), ConfigBlock(label='data2', body='x\\ny\\n z')]
    """
    pos = 0
    while True:
        match = DATA_BLOCK_PAT.search(text, pos)
        if match is None:
            return
        label, sep, body = match.groups()
        body = list_to_sep_string(body, "\n")
        if sep:
            body = body.replace(sep, "\n")
        logger.debug("Found data block %r at offset %d", label, match.start())
        pos = match.end()
        yield ConfigBlock(label, body)


def iter_config_blocks(text: str) -> Iterator[ConfigBlock]:
    """
    Yield the `< ... >` raw blocks of `text` from left to right.

    All text between the brackets is kept, including whitespace, except the line
    break ending the opening line and the one before the closing `>` line.

    >>> list(iter_config_blocks("block1<\\nfoo\\n>\\nblock2 <more stuff...\\n>\\n"))
    [ConfigBlock(label='block1', body='foo'), ConfigBlock(label='block2', body='more stuff...')]
    """
    pos = 0
    while True:
        match = RAW_BLOCK_PAT.search(text, pos)
        if match is None:
            return
        label, body = match.groups()
        if body.startswith("\n"):
            body = body[1:]
        logger.debug("Found raw block %r at offset %d", label, match.start())
        pos = match.end()
        yield ConfigBlock(label, body)


def handle_config_data(text: str, handler: BlockHandler) -> int:
    """
    Call `handler(label, body)` for each data block of `text`.
    Returns the number of blocks handled.
    """
    count = 0
    for block in iter_config_data(text):
        handler(block.label, block.body)
        count += 1
    return count


def handle_config_blocks(text: str, handler: BlockHandler) -> int:
    """
    Call `handler(label, body)` for each raw block of `text`.
    Returns the number of blocks handled.
    """
    count = 0
    for block in iter_config_blocks(text):
        handler(block.label, block.body)
        count += 1
    return count


def load_config_data(
    path: Union[str, PathLike], handler: BlockHandler, encoding: str = "utf-8"
) -> int:
    """
    Read the file at `path` and pass its data blocks to `handler`.
    Files written in Windows-1252 can be read with `encoding="latin-1"` and
    cleaned afterwards with `latin1_runeize`.
    """
    return handle_config_data(read_text(path, encoding=encoding), handler)


def load_config_blocks(
    path: Union[str, PathLike], handler: BlockHandler, encoding: str = "utf-8"
) -> int:
    """Read the file at `path` in `encoding` and pass its raw blocks to `handler`."""
    return handle_config_blocks(read_text(path, encoding=encoding), handler)
