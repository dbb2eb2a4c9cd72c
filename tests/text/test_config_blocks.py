import logging
from pathlib import Path
from typing import List, Tuple

import pytest

from txtkit.text.charmap import latin1_runeize
from txtkit.text.config_blocks import (
    ConfigBlock,
    handle_config_blocks,
    handle_config_data,
    iter_config_blocks,
    iter_config_data,
    load_config_blocks,
    load_config_data,
)
from txtkit.text.lists import list_to_sep_string

CONFIG_TEXT = """\
Some text which is not part of any block.

block1 <
block1 blah blah
blah blah blah
>

data1 {
apple
banana
    # not a fruit
cherry

date
{ }
} {
fig
grape
}

block2<
block2 blah blah
blah blah blah
>

data2 , {
apple, banana,cherry
date
# ,skipped
fig , grape
}

block3 <block3 blah blah
blah blah blah
>

unknownBlock <
  indented >
>
"""

DATA1 = "apple\nbanana\ncherry\ndate\n{ }\n} {\nfig\ngrape"
DATA2 = "apple, banana,cherry\ndate\nfig , grape"


class Collector:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []

    def __call__(self, label: str, body: str) -> None:
        self.calls.append((label, body))


class TestConfigData:
    def test_single_block(self) -> None:
        assert list(iter_config_data("data1 {\n a\n b\n}\n")) == [ConfigBlock("data1", "a\nb")]

    def test_blocks_in_order(self) -> None:
        blocks = list(iter_config_data(CONFIG_TEXT))
        assert [b.label for b in blocks] == ["data1", "data2"]
        assert blocks[0].body == DATA1

    def test_separator_is_replaced_with_newline(self) -> None:
        body = dict(iter_config_data(CONFIG_TEXT))["data2"]
        assert body == DATA2.replace(",", "\n")
        # spaces after the separator are kept
        assert body.split("\n")[1] == " banana"
        assert list_to_sep_string(body, "\n") == "apple\nbanana\ncherry\ndate\nfig\ngrape"

    @pytest.mark.parametrize("sep", list(",;:|/"))
    def test_every_separator(self, sep: str) -> None:
        text = f"lbl{sep}{{\nx{sep}y\n}}\n"
        assert list(iter_config_data(text)) == [ConfigBlock("lbl", "x\ny")]

    def test_label_at_line_start_only(self) -> None:
        text = "  indented {\na\n}\nkey value {\nb\n}\n"
        assert list(iter_config_data(text)) == []

    def test_closing_brace_must_be_alone(self) -> None:
        assert list(iter_config_data("data {\na\n }\n")) == []
        assert list(iter_config_data("data {\na\n};\n")) == []
        # no line break after the closing brace
        assert list(iter_config_data("data {\na\n}")) == []

    def test_unclosed_block_is_skipped(self) -> None:
        assert list(iter_config_data("data {\na\nb\n")) == []

    def test_handler(self) -> None:
        collector = Collector()
        count = handle_config_data(CONFIG_TEXT, collector)
        assert count == 2
        assert collector.calls == [("data1", DATA1), ("data2", DATA2.replace(",", "\n"))]

    def test_lazy(self) -> None:
        blocks = iter_config_data("a {\n1\n}\nb {\n2\n}\n")
        assert next(blocks) == ConfigBlock("a", "1")
        assert next(blocks) == ConfigBlock("b", "2")
        with pytest.raises(StopIteration):
            next(blocks)


class TestConfigBlocks:
    def test_single_block(self) -> None:
        assert list(iter_config_blocks("block1<\nfoo\n>\n")) == [ConfigBlock("block1", "foo")]

    def test_blocks_in_order(self) -> None:
        blocks = list(iter_config_blocks(CONFIG_TEXT))
        assert blocks == [
            ConfigBlock("block1", "block1 blah blah\nblah blah blah"),
            ConfigBlock("block2", "block2 blah blah\nblah blah blah"),
            ConfigBlock("block3", "block3 blah blah\nblah blah blah"),
            ConfigBlock("unknownBlock", "  indented >"),
        ]

    def test_body_is_raw(self) -> None:
        text = "raw <\n  # kept\n\n  spaced  \n>\n"
        assert list(iter_config_blocks(text)) == [ConfigBlock("raw", "  # kept\n\n  spaced  ")]

    def test_empty_block(self) -> None:
        assert list(iter_config_blocks("empty<\n>\n")) == [ConfigBlock("empty", "")]

    def test_closing_bracket_must_be_alone(self) -> None:
        assert list(iter_config_blocks("blk <\nfoo\n >\n")) == []
        assert list(iter_config_blocks("blk <\nfoo\n>")) == []

    def test_handler(self) -> None:
        collector = Collector()
        assert handle_config_blocks(CONFIG_TEXT, collector) == 4
        assert [label for label, _ in collector.calls] == [
            "block1",
            "block2",
            "block3",
            "unknownBlock",
        ]


class TestLoadConfig:
    def test_load_config_data(self, tmp_path: Path) -> None:
        path = tmp_path / "config.txt"
        path.write_text(CONFIG_TEXT, encoding="utf-8")
        collector = Collector()
        assert load_config_data(path, collector) == 2
        assert collector.calls[0] == ("data1", DATA1)

    def test_load_config_blocks(self, tmp_path: Path) -> None:
        path = tmp_path / "config.txt"
        path.write_text(CONFIG_TEXT, encoding="utf-8")
        collector = Collector()
        assert load_config_blocks(str(path), collector) == 4

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config_data(tmp_path / "missing.txt", Collector())

    def test_load_windows_1252_file(self, tmp_path: Path) -> None:
        path = tmp_path / "quotes.txt"
        path.write_bytes(b"quotes {\n\x93hi\x94\n}\nmotd <\n\x85bye\n>\n")
        collector = Collector()
        assert load_config_data(path, collector, encoding="latin-1") == 1
        assert load_config_blocks(path, collector, encoding="latin-1") == 1
        assert [(label, latin1_runeize(body)) for label, body in collector.calls] == [
            ("quotes", "“hi”"),
            ("motd", "…bye"),
        ]

    def test_undecodable_file_is_logged(self, tmp_path: Path, caplog) -> None:
        path = tmp_path / "quotes.txt"
        path.write_bytes(b"quotes {\n\x93hi\x94\n}\n")
        with caplog.at_level(logging.ERROR, logger="txtkit.utils.file_io"):
            with pytest.raises(UnicodeDecodeError):
                load_config_data(path, Collector())
        assert "Failed to read file" in caplog.text
        assert str(path) in caplog.text
