"""Tests for locating @tokens groups."""

import pytest

from csstokens.config import ExtractorConfig
from csstokens.errors import CommentParseError
from csstokens.extraction import locate_token_groups
from csstokens.model.stylesheet import Stylesheet
from csstokens.model.tokens import LineRange
from csstokens.parser import parse_stylesheet


class TestFixtureGroups:
    def test_two_groups(self, stylesheets: list[Stylesheet]) -> None:
        groups = locate_token_groups(stylesheets[0])
        assert [g.label for g in groups] == ["Colors", "Spacing"]

    def test_ranges_from_comment_order(self, stylesheets: list[Stylesheet]) -> None:
        colors, spacing = locate_token_groups(stylesheets[0])
        assert colors.position == LineRange(start=1, end=11)
        assert spacing.position == LineRange(start=12, end=None)

    def test_presenter(self, stylesheets: list[Stylesheet]) -> None:
        colors, spacing = locate_token_groups(stylesheets[0])
        assert colors.presenter == "Color"
        assert spacing.presenter is None

    def test_groups_start_empty(self, stylesheets: list[Stylesheet]) -> None:
        groups = locate_token_groups(stylesheets[0])
        assert all(g.tokens == () for g in groups)
        assert all(g.filename == "tokens.css" for g in groups)

    def test_file_without_markers(self, stylesheets: list[Stylesheet]) -> None:
        assert locate_token_groups(stylesheets[1]) == []


class TestMarkers:
    def test_label_keeps_all_words(self) -> None:
        sheet = parse_stylesheet("/* @tokens Font Sizes */ .a { --f: 1rem; }")
        assert locate_token_groups(sheet)[0].label == "Font Sizes"

    def test_empty_label(self) -> None:
        sheet = parse_stylesheet("/* @tokens */")
        assert locate_token_groups(sheet)[0].label == ""

    def test_comments_inside_rules_ignored(self) -> None:
        sheet = parse_stylesheet(".a {\n  /* @tokens Nope */\n  --x: 1px;\n}")
        assert locate_token_groups(sheet) == []

    def test_ordinary_comments_ignored(self) -> None:
        sheet = parse_stylesheet("/* header */\n/* @tokens A */\n/* footer */")
        groups = locate_token_groups(sheet)
        assert len(groups) == 1
        assert groups[0].position == LineRange(start=2, end=None)

    def test_ranges_never_overlap(self) -> None:
        source = "\n".join(f"/* @tokens G{i} */\n.g{i} {{ --v{i}: {i}px; }}" for i in range(4))
        groups = locate_token_groups(parse_stylesheet(source))
        for current, following in zip(groups, groups[1:]):
            assert current.position.end == following.position.start - 1

    def test_custom_marker(self) -> None:
        sheet = parse_stylesheet("/* @palette Brand\n@view Swatch */")
        config = ExtractorConfig(token_marker="palette", presenter_tag="view")
        (group,) = locate_token_groups(sheet, config)
        assert group.label == "Brand"
        assert group.presenter == "Swatch"


class TestMalformedMarkers:
    def test_marker_not_at_line_start(self) -> None:
        sheet = parse_stylesheet("\n/* see @tokens */", filename="a.css")
        with pytest.raises(CommentParseError) as exc_info:
            locate_token_groups(sheet)
        assert exc_info.value.filename == "a.css"
        assert exc_info.value.line == 2

    def test_malformed_tag_propagates(self) -> None:
        sheet = parse_stylesheet("/* @tokens {Colors */", filename="a.css")
        with pytest.raises(CommentParseError) as exc_info:
            locate_token_groups(sheet)
        assert exc_info.value.line == 1
