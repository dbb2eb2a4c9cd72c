import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable

from txtkit.core.models import Document


class Filter(ABC):
    """
    Base class of the text filters.

    A subclass implements `apply`, which rewrites `document.text` and may report
    errors on the document or reject it. Calling the filter runs it on a plain string:

    ```python
    SpaceCleaner()("a   b")  # "a b"
    ```
    """

    def __init__(self, skip_rejected: bool = True, *args: Any, **kwargs: Any) -> None:
        """
        Parameters
        ----------
        skip_rejected : bool
            If `True`, documents rejected by an earlier filter pass through untouched.
        """
        self.name = self.__class__.__name__
        self.logger = logging.getLogger(f"{self.__module__}.{self.__class__.__name__}")
        self.skip_rejected = skip_rejected

    @abstractmethod
    def apply(self, document: Document) -> Document:
        """
        Process one document and return it.

        Rewrite `document.text`, append non-fatal errors to `document.errors`, or call
        `document.reject(reason)` when the text is unusable.
        """

    def _apply(self, document: Document) -> Document:
        if self.skip_rejected and document.is_rejected:
            return document
        document = self.apply(document)
        if document.is_rejected and document.reject_reason is None:
            document.reject_reason = f"rejected by {self.name}"
        return document

    def apply_stream(self, stream: Iterable[Document]) -> Iterable[Document]:
        """
        Lazily apply the filter to a stream of documents.

        An exception raised while processing a document does not stop the stream:
        the document is rejected with the error message as its reason.
        """
        for document in stream:
            try:
                yield self._apply(document)
            except Exception as e:
                msg = f"{e!r} occurs while processing {self.name} with {document!r}"
                self.logger.error(msg, exc_info=True)
                document.reject(msg)
                yield document

    def __call__(self, text: str, **kwargs: Any) -> str:
        return self._apply(Document(text, **kwargs)).text
