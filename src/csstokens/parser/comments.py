"""Hand-written parser for JSDoc-style tags inside CSS documentation comments.

Syntax example:
    /**
     * @tokens Brand Colors
     * @presenter Color
     */

Each line is stripped of its ``*`` gutter. A line starting with ``@name``
opens a tag; following lines that do not start with ``@`` continue it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from csstokens.errors import CommentParseError

__all__ = ["CommentBlock", "Tag", "parse_comment", "parse_comment_tags"]

# Leading whitespace, an optional "*" gutter and a single following space.
_GUTTER_RE = re.compile(r"^\s*\*?[ \t]?")

# "@tag rest-of-line"; the tag name may be empty, which is rejected below.
_TAG_RE = re.compile(
    r"""
    ^@
    (?P<tag>[^\s{]*)         # tag name
    (?P<rest>.*)$            # optional {type}, name and description
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class Tag:
    """A single ``@tag {type} name description`` entry."""

    tag: str
    name: str = ""
    type: str = ""
    description: str = ""
    source: str = ""


@dataclass(frozen=True)
class CommentBlock:
    """A parsed comment: free-text description followed by its tags."""

    description: str = ""
    tags: list[Tag] = field(default_factory=list)

    def find(self, tag: str) -> Tag | None:
        """Return the first tag named *tag*, or None."""
        return next((t for t in self.tags if t.tag == tag), None)


def _split_type(rest: str, tag: str) -> tuple[str, str]:
    """Split a leading ``{type}`` off *rest*, honouring nested braces."""
    if not rest.startswith("{"):
        return "", rest
    depth = 0
    for index, char in enumerate(rest):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return rest[1:index].strip(), rest[index + 1 :].strip()
    raise CommentParseError(f"Missing closing '}}' in type of @{tag}")


def _build_tag(lines: list[str]) -> Tag:
    match = _TAG_RE.match(lines[0])
    if match is None or not match.group("tag"):
        raise CommentParseError(f"Missing tag name: {lines[0]!r}")
    tag = match.group("tag")
    type_, rest = _split_type(match.group("rest").strip(), tag)
    name, _, description = rest.partition(" ")
    description = "\n".join([description.strip(), *lines[1:]]).strip()
    return Tag(
        tag=tag,
        name=name,
        type=type_,
        description=description,
        source="\n".join(lines).strip(),
    )


def parse_comment(source: str) -> CommentBlock:
    """Parse a complete ``/* ... */`` comment into a CommentBlock.

    Raises :class:`CommentParseError` when the delimiters are missing, a tag
    has no name, or a ``{type}`` is not closed.
    """
    text = source.strip()
    if len(text) < 4 or not text.startswith("/*") or not text.endswith("*/"):
        raise CommentParseError("Comment must be enclosed in '/*' and '*/'")
    body = text[2:-2]
    if body.startswith("*"):
        body = body[1:]

    description: list[str] = []
    tag_lines: list[list[str]] = []
    for raw in body.splitlines():
        line = _GUTTER_RE.sub("", raw, count=1).strip()
        if line.startswith("@"):
            tag_lines.append([line])
        elif tag_lines:
            if line:
                tag_lines[-1].append(line)
        elif line:
            description.append(line)

    return CommentBlock(
        description="\n".join(description),
        tags=[_build_tag(lines) for lines in tag_lines],
    )


def parse_comment_tags(source: str) -> list[Tag]:
    """Parse a complete comment and return only its tags."""
    return parse_comment(source).tags
