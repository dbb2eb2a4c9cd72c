from typing import Any, Dict, List, Optional


class Document:
    """
    A text on its way through a chain of filters.

    Filters rewrite `text` in place. Problems that leave a usable text behind, such as an
    unknown template token, are appended to `errors`. A filter that finds the text
    unusable calls `reject`, and later filters skip the document.

    Attributes:
        text (str): The current text.
        is_rejected (bool): True once a filter has rejected the document.
        extras (Dict[str, Any]): Free-form metadata carried along with the text.
        errors (List[Exception]): Non-fatal errors in the order the filters reported them.
        reject_reason (Optional[str]): Why the document was rejected, `None` while it is not.
    """

    def __init__(
        self,
        text: str,
        is_rejected: bool = False,
        extras: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.text = text
        self._original = text
        self.is_rejected = is_rejected
        self.extras: Dict[str, Any] = {} if extras is None else extras
        self.errors: List[Exception] = []
        self.reject_reason: Optional[str] = None

    @property
    def original(self) -> str:
        """The text the document was created with."""
        return self._original

    @property
    def ok(self) -> bool:
        return not self.is_rejected and not self.errors

    def reject(self, reason: str) -> None:
        """Mark the document rejected. The first reason given is kept."""
        self.is_rejected = True
        if self.reject_reason is None:
            self.reject_reason = reason

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return (
            f"Document(text={self.text!r}, is_rejected={self.is_rejected}, errors={self.errors!r})"
        )
