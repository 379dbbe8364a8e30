"""Tests for the documentation comment tag parser."""

import pytest

from csstokens.parser import CommentParseError, ParseError, Tag, parse_comment, parse_comment_tags
from csstokens.parser.comments import _build_tag


class TestSingleLine:
    def test_tokens_tag(self) -> None:
        tags = parse_comment_tags("/*@tokens Colors*/")
        assert tags == [Tag(tag="tokens", name="Colors", source="@tokens Colors")]

    def test_tag_without_name(self) -> None:
        tags = parse_comment_tags("/* @tokens */")
        assert tags == [Tag(tag="tokens", source="@tokens")]

    def test_name_and_description(self) -> None:
        tag = parse_comment_tags("/* @tokens Font Sizes */")[0]
        assert tag.name == "Font"
        assert tag.description == "Sizes"
        assert tag.source == "@tokens Font Sizes"


class TestMultiLine:
    SOURCE = """/**
     * Brand palette.
     * Used by every theme.
     *
     * @tokens Colors
     * @presenter Color
     */"""

    def test_description(self) -> None:
        block = parse_comment(self.SOURCE)
        assert block.description == "Brand palette.\nUsed by every theme."

    def test_tags_in_order(self) -> None:
        block = parse_comment(self.SOURCE)
        assert [t.tag for t in block.tags] == ["tokens", "presenter"]

    def test_find(self) -> None:
        block = parse_comment(self.SOURCE)
        presenter = block.find("presenter")
        assert presenter is not None
        assert presenter.name == "Color"
        assert block.find("missing") is None

    def test_continuation_lines(self) -> None:
        tag = parse_comment_tags("/*\n * @tokens Spacing\n * scale in px\n */")[0]
        assert tag.source == "@tokens Spacing\nscale in px"
        assert tag.description == "scale in px"

    def test_at_sign_mid_line_is_not_a_tag(self) -> None:
        block = parse_comment("/* see @tokens below */")
        assert block.tags == []
        assert block.description == "see @tokens below"


class TestTypes:
    def test_type_in_braces(self) -> None:
        tag = parse_comment_tags("/* @param {string} label The label */")[0]
        assert tag.type == "string"
        assert tag.name == "label"
        assert tag.description == "The label"

    def test_nested_braces(self) -> None:
        tag = parse_comment_tags("/* @param {{a: number}} opts */")[0]
        assert tag.type == "{a: number}"
        assert tag.name == "opts"


class TestMalformed:
    def test_missing_delimiters(self) -> None:
        with pytest.raises(CommentParseError):
            parse_comment("@tokens Colors")

    def test_unclosed_type(self) -> None:
        with pytest.raises(CommentParseError, match="Missing closing"):
            parse_comment("/* @param {string label */")

    def test_empty_tag_name(self) -> None:
        with pytest.raises(CommentParseError, match="Missing tag name"):
            parse_comment("/* @ Colors */")

    def test_is_a_parse_error(self) -> None:
        with pytest.raises(ParseError):
            parse_comment("/* unterminated")

    def test_tag_line_without_at_sign(self) -> None:
        with pytest.raises(CommentParseError, match="Missing tag name"):
            _build_tag(["not a tag"])
