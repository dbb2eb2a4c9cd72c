"""
Text replacement inside template strings using string maps.

`<token>` replacement is done by wrapping a keyword with the `<` and `>` characters,
`{variable}` replacement is done by wrapping a keyword with the `{` and `}` characters.

Replacement values of tokens are inserted as they are, so they may contain `<...>`.
Values of variables may contain further `{variables}`, which are expanded by
repeated passes over the whole text, up to `MAX_DEPTH` passes.

    tokens = TokenMap(name="hojicha", num="3")
    text, err = tokens.detokenize('{"customer": <num>, "name": "<name>"}')
"""

import logging
import re
from typing import Callable, Dict, List, Mapping, NamedTuple, Optional, Pattern, Tuple

from txtkit.core.exceptions import (
    MaxDepthExceededError,
    SubstitutionError,
    UnknownTokenError,
    UnknownVariableError,
)

logger = logging.getLogger(__name__)

MAX_DEPTH = 10

TOKEN_PAT = re.compile(r"<([0-9A-Za-z]+)>")
VARIABLE_PAT = re.compile(r"\{([0-9A-Za-z]+)\}")


class SubstitutionResult(NamedTuple):
    """
    Best-effort substituted text and the first error met while producing it.
    Unpacks like a pair: `text, err = replace_vars(...)`.
    """

    text: str
    error: Optional[SubstitutionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> str:
        """Return the text, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.text


def _substitute_pass(
    src: str,
    pattern: Pattern[str],
    mapping: Mapping[str, str],
    on_unknown: Callable[[str], Tuple[str, SubstitutionError]],
) -> Tuple[str, Optional[SubstitutionError], int]:
    """
    Replace every placeholder of `pattern` in `src` once, scanning left to right.
    Inserted values are not scanned again within this pass.

    Returns the new text, the first error and the number of placeholders replaced.
    """
    pieces: List[str] = []
    error: Optional[SubstitutionError] = None
    count = 0
    pos = 0
    for match in pattern.finditer(src):
        name = match.group(1)
        pieces.append(src[pos : match.start()])
        if name in mapping:
            pieces.append(mapping[name])
        else:
            value, err = on_unknown(name)
            pieces.append(value)
            if error is None:
                error = err
        count += 1
        pos = match.end()
    pieces.append(src[pos:])
    return "".join(pieces), error, count


def _bad_token(name: str) -> Tuple[str, SubstitutionError]:
    return f"!BAD-TOKEN:'{name}'!", UnknownTokenError(name)


def _bad_variable(name: str) -> Tuple[str, SubstitutionError]:
    return f"!BAD-VAR:'{name}'!", UnknownVariableError(name)


def detokenize(src: str, tokens: Mapping[str, str]) -> SubstitutionResult:
    """
    Do `<token>` replacement in a string. Replacement values are never rescanned,
    so tokens cannot expand into other tokens.

    Unknown tokens are replaced with `!BAD-TOKEN:'name'!` and the first of them is
    reported as an `UnknownTokenError`; the rest of the text is still processed.

    >>> detokenize("Hi <name>, <x>!", {"name": "<b>you</b>"})
    SubstitutionResult(text="Hi <b>you</b>, !BAD-TOKEN:'x'!!", error=UnknownTokenError('DeTokenize: <x> unknown'))
    """
    text, error, _ = _substitute_pass(src, TOKEN_PAT, tokens, _bad_token)
    return SubstitutionResult(text, error)


def replace_vars(src: str, variables: Mapping[str, str]) -> SubstitutionResult:
    """
    Do `{variable}` replacement in a string; values may contain other `{variables}`.

    The whole text is rescanned after each pass until a pass replaces nothing.
    A pass which meets an unknown variable is completed with `!BAD-VAR:'name'!` in place,
    then the expansion stops with an `UnknownVariableError`.
    When `MAX_DEPTH` passes still leave something to replace, the expansion stops with a
    `MaxDepthExceededError` and the text as it stands.

    >>> replace_vars("{name}", {"name": "{getName}", "getName": "Name-Result"})
    SubstitutionResult(text='Name-Result', error=None)
    """
    depth = 0
    while True:
        if depth >= MAX_DEPTH:
            logger.debug("Variable expansion aborted after %d passes", depth)
            return SubstitutionResult(src, MaxDepthExceededError(depth))
        depth += 1
        src, error, count = _substitute_pass(src, VARIABLE_PAT, variables, _bad_variable)
        if error is not None:
            return SubstitutionResult(src, error)
        if count == 0:
            return SubstitutionResult(src)


class TokenMap(Dict[str, str]):
    """
    Map of `<token>` names to replacement values.

    >>> TokenMap(num="Num-Token").detokenize("<num>").text
    'Num-Token'
    """

    def detokenize(self, src: str) -> SubstitutionResult:
        return detokenize(src, self)


class VariableMap(Dict[str, str]):
    """Map of `{variable}` names to values which may refer to other variables."""

    def replace_vars(self, src: str) -> SubstitutionResult:
        return replace_vars(src, self)
