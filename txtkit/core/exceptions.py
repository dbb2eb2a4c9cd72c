"""Error values returned by the template substitution functions."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    UNKNOWN_TOKEN = "unknown-token"
    UNKNOWN_VARIABLE = "unknown-variable"
    MAX_DEPTH_EXCEEDED = "max-depth-exceeded"


class SubstitutionError(Exception):
    """
    Base class of the substitution failures.

    Substitution functions do not raise these errors, they return them together with
    the best-effort text. See `txtkit.text.substitution.SubstitutionResult`.

    Attributes:
        kind (ErrorKind): Category of the failure.
        name (Optional[str]): The placeholder name that could not be resolved, if any.
    """

    kind: ErrorKind

    def __init__(self, message: str, name: Optional[str] = None) -> None:
        super().__init__(message)
        self.name = name


class UnknownTokenError(SubstitutionError):
    kind = ErrorKind.UNKNOWN_TOKEN

    def __init__(self, name: str) -> None:
        super().__init__(f"DeTokenize: <{name}> unknown", name=name)


class UnknownVariableError(SubstitutionError):
    kind = ErrorKind.UNKNOWN_VARIABLE

    def __init__(self, name: str) -> None:
        super().__init__(f"ReplaceVars: {{{name}}} unknown", name=name)


class MaxDepthExceededError(SubstitutionError):
    kind = ErrorKind.MAX_DEPTH_EXCEEDED

    def __init__(self, depth: int) -> None:
        super().__init__("ReplaceVars: max depth")
        self.depth = depth
