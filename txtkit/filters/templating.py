from typing import Any, Mapping, Optional

from txtkit.core.filter_interface import Filter
from txtkit.core.models import Document
from txtkit.text.substitution import SubstitutionResult, detokenize, replace_vars


class _TemplateFilter(Filter):
    """
    置換に失敗したプレースホルダは `!BAD-...!` に置き換えられ, エラーは
    `Document.errors` に追加されます. `reject_on_error=True` の場合は
    ドキュメントを破棄します.
    """

    def __init__(
        self,
        mapping: Optional[Mapping[str, str]] = None,
        reject_on_error: bool = False,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._mapping: Mapping[str, str] = {} if mapping is None else mapping
        self.reject_on_error = reject_on_error

    def substitute(self, text: str) -> SubstitutionResult:
        raise NotImplementedError(f"{self.__class__.__name__}.substitute method is not defined")

    def apply(self, document: Document) -> Document:
        result = self.substitute(document.text)
        document.text = result.text
        if result.error is not None:
            self.logger.warning(f"{result.error} ({result.error.kind.value})")
            document.errors.append(result.error)
            if self.reject_on_error:
                document.reject(f"{self.name}: {result.error.kind.value}")
        return document


class DeTokenize(_TemplateFilter):
    """
    `<token>` をトークンマップの値で置き換えます. 置き換えた値は再走査しません.
    """

    def substitute(self, text: str) -> SubstitutionResult:
        """
        >>> DeTokenize({"name": "hojicha"})("<name> & <other>")
        "hojicha & !BAD-TOKEN:'other'!"
        """
        return detokenize(text, self._mapping)


class ReplaceVars(_TemplateFilter):
    """
    `{variable}` を変数マップの値で置き換えます. 値に含まれる `{variable}` も
    最大 10 回まで繰り返し展開します.
    """

    def substitute(self, text: str) -> SubstitutionResult:
        """
        >>> ReplaceVars({"tea": "{kind}", "kind": "hojicha"})("I like {tea}.")
        'I like hojicha.'
        """
        return replace_vars(text, self._mapping)
