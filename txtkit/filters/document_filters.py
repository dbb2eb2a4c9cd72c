import logging
import re
from typing import Any

from txtkit.core.filter_interface import Filter
from txtkit.core.models import Document
from txtkit.text.charmap import latin1_runeize
from txtkit.text.normalization import clean_spaces, trim_dot0s
from txtkit.text.unicode_escape import fix_unicode_escaped_text

logger = logging.getLogger(__name__)


class Identity(Filter):
    """何も変化を加えないフィルタです. テスト・デバッグに用いられます."""

    def apply(self, document: Document) -> Document:
        return document


class Latin1Runeizer(Filter):
    """
    Windows-1252 の C1 領域 (0x80-0x9F) の文字を対応する Unicode 文字に置き換えます.
    割り当てのない位置, DEL, ソフトハイフンは '-' になります.
    """

    def apply(self, document: Document) -> Document:
        """
        >>> Latin1Runeizer()("\\x93hello\\x94")
        '“hello”'
        """
        document.text = latin1_runeize(document.text)
        return document


class SpaceCleaner(Filter):
    """
    連続する半角スペースを 1 つにまとめ, 前後の空白を取り除きます.
    タブや改行はまとめません.
    """

    def apply(self, document: Document) -> Document:
        """
        >>> SpaceCleaner()("  hello    world ")
        'hello world'
        """
        document.text = clean_spaces(document.text)
        return document


class UnicodeEscapeFixer(Filter):
    """
    テキスト中の `\\uHHHH` 形式のエスケープを実際の文字に戻します.
    """

    def apply(self, document: Document) -> Document:
        document.text = fix_unicode_escaped_text(document.text)
        return document


class NumberTrimmer(Filter):
    """
    テキスト中の小数の末尾の 0 を取り除きます.
    `3.20000` は `3.2` に, `3.000` は `3` になります.
    ドットで区切られた番号 (`1.2.0` など) は数値とみなさず, そのままにします.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.numeral_pat = re.compile(r"(?<![\w.])-?\d+\.\d+(?!\w|\.\d)")

    def apply(self, document: Document) -> Document:
        """
        >>> NumberTrimmer()("width: 3.20000, height: 4.000, version 1.2.0")
        'width: 3.2, height: 4, version 1.2.0'
        >>> NumberTrimmer()("The width is 3.20000.")
        'The width is 3.2.'
        """
        document.text = self.numeral_pat.sub(lambda m: trim_dot0s(m.group()), document.text)
        return document


if __name__ == "__main__":
    import doctest

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("[%(levelname)s]%(name)s:%(message)s"))
    logging.getLogger().addHandler(handler)
    logging.getLogger().setLevel(logging.DEBUG)

    doctest.testmod()
