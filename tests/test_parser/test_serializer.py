"""Tests for serializing stylesheets back to CSS."""

import pytest

from csstokens.model.stylesheet import AtRule, GroupRule, KeyframesRule, Position, Rule
from csstokens.parser import parse_stylesheet, serialize_node, serialize_stylesheet


class TestSerializeKeyframes:
    def test_canonical_layout(self) -> None:
        sheet = parse_stylesheet("@keyframes spin{to{transform:rotate(360deg)}}")
        assert serialize_stylesheet(sheet) == (
            "@keyframes spin {\n"
            "  to {\n"
            "    transform: rotate(360deg);\n"
            "  }\n"
            "}\n"
        )

    def test_vendor_prefix_and_selector_list(self) -> None:
        sheet = parse_stylesheet("@-moz-keyframes blink { 0%,100% { opacity: 1 } 50% { opacity: 0 } }")
        assert serialize_stylesheet(sheet) == (
            "@-moz-keyframes blink {\n"
            "  0%, 100% {\n"
            "    opacity: 1;\n"
            "  }\n"
            "  50% {\n"
            "    opacity: 0;\n"
            "  }\n"
            "}\n"
        )

    def test_comments_inside_keyframes_survive(self) -> None:
        sheet = parse_stylesheet("@keyframes a { /* start */ from { top: 0; } }")
        assert "  /* start */\n" in serialize_stylesheet(sheet)

    def test_reparse_yields_same_rules(self) -> None:
        source = (
            "@keyframes one { from { opacity: 0; } to { opacity: 1; } }\n"
            ".x { color: red; }\n"
            "@-webkit-keyframes two { 50% { top: 1px; } }\n"
        )
        sheet = parse_stylesheet(source)
        reparsed = parse_stylesheet(serialize_stylesheet(sheet))
        assert [type(r) for r in reparsed.rules] == [KeyframesRule, Rule, KeyframesRule]
        assert [(k.vendor, k.name) for k in reparsed.keyframes] == [
            ("", "one"),
            ("-webkit-", "two"),
        ]


class TestSerializeOtherNodes:
    def test_rule_with_comment(self) -> None:
        sheet = parse_stylesheet("a, b { --x: 1px; /* one */ }")
        assert serialize_stylesheet(sheet) == "a, b {\n  --x: 1px;\n  /* one */\n}\n"

    def test_group_rule_nests(self) -> None:
        sheet = parse_stylesheet("@media screen { .a { margin: 0; } }")
        assert isinstance(sheet.rules[0], GroupRule)
        assert serialize_stylesheet(sheet) == (
            "@media screen {\n  .a {\n    margin: 0;\n  }\n}\n"
        )

    def test_at_statement(self) -> None:
        sheet = parse_stylesheet('@charset "utf-8";')
        assert serialize_stylesheet(sheet) == '@charset "utf-8";\n'

    def test_empty_at_block(self) -> None:
        node = AtRule(keyword="page", prelude="", position=Position(1, 1), declarations=())
        assert serialize_node(node) == "@page {\n}\n"

    def test_empty_stylesheet(self) -> None:
        assert serialize_stylesheet(parse_stylesheet("")) == ""

    def test_unknown_node_rejected(self) -> None:
        with pytest.raises(TypeError):
            serialize_node(object())  # type: ignore[arg-type]
