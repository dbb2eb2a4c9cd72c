from typing import Any, Iterable, List

from txtkit.core.filter_interface import Filter
from txtkit.core.models import Document


class Compose(Filter):
    """
    Run several filters one after another.

    Nested composes are flattened and each filter is renamed `"{index}-{ClassName}"`,
    so log records and reject reasons tell which step of the chain they come from.
    Calling a compose returns `""` for a rejected text.
    """

    def __init__(self, filters: List[Filter], *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.set_filters(filters)

    def set_filters(self, filters: List[Filter]) -> None:
        flattened: List[Filter] = []
        for f in filters:
            if isinstance(f, Compose):
                flattened.extend(f.filters)
            else:
                flattened.append(f)

        for filter_idx, f in enumerate(flattened):
            f.name = f"{filter_idx}-{f.__class__.__name__}"
        self.filters = flattened

    def __call__(self, text: str, **kwargs: Any) -> str:
        document = self.apply(Document(text, **kwargs))
        return "" if document.is_rejected else document.text

    def apply(self, document: Document) -> Document:
        for filt in self.filters:
            document = filt._apply(document)
        return document

    def apply_stream(self, stream: Iterable[Document]) -> Iterable[Document]:
        """
        Chain the `apply_stream` of every filter, so a failure in one step rejects
        only the document being processed.
        """
        for filt in self.filters:
            stream = filt.apply_stream(stream)
        yield from stream
