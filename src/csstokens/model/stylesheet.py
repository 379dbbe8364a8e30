"""Stylesheet AST: the node dataclasses produced by the CSS parser.

Every node carries a :class:`Position` with 1-based start/end lines.
Traversal sites dispatch with ``isinstance`` over the node classes below.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass(frozen=True)
class Position:
    """Line span of a node in its source file (1-based, inclusive)."""

    start_line: int
    end_line: int


@dataclass(frozen=True)
class Comment:
    """A ``/* ... */`` comment; ``text`` excludes the delimiters."""

    text: str
    position: Position


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value`` property declaration."""

    name: str
    value: str
    position: Position

    @property
    def is_custom_property(self) -> bool:
        return self.name.startswith("--")


BlockItem = Union[Declaration, Comment]


@dataclass(frozen=True)
class Rule:
    """A style rule: a selector list followed by a declaration block."""

    selectors: tuple[str, ...]
    declarations: tuple[BlockItem, ...]
    position: Position

    @property
    def properties(self) -> list[Declaration]:
        return [d for d in self.declarations if isinstance(d, Declaration)]


@dataclass(frozen=True)
class Keyframe:
    """One frame (``from``, ``to``, ``50%``...) inside a ``@keyframes`` rule."""

    selectors: tuple[str, ...]
    declarations: tuple[BlockItem, ...]
    position: Position


@dataclass(frozen=True)
class KeyframesRule:
    """``@keyframes name { ... }``, optionally vendor prefixed."""

    name: str
    frames: tuple[Union[Keyframe, Comment], ...]
    position: Position
    vendor: str = ""  # "-webkit-", "-moz-", ...


@dataclass(frozen=True)
class GroupRule:
    """A conditional group rule (``@media``, ``@supports``...) holding nested rules."""

    keyword: str
    prelude: str
    rules: tuple["Node", ...]
    position: Position


@dataclass(frozen=True)
class AtRule:
    """Any other at-rule.

    ``declarations`` is ``None`` for statement at-rules such as ``@import``
    and a (possibly empty) tuple for block at-rules such as ``@font-face``.
    """

    keyword: str
    prelude: str
    position: Position
    declarations: tuple[BlockItem, ...] | None = None


Node = Union[Rule, Comment, KeyframesRule, GroupRule, AtRule]


@dataclass(frozen=True)
class Stylesheet:
    """A parsed CSS file: its top-level nodes in source order."""

    rules: tuple[Node, ...] = field(default_factory=tuple)
    filename: str | None = None

    def iter_declarations(self) -> Iterator[Declaration]:
        """Yield every property declaration in document order.

        Descends into group rules and declaration-bearing at-rules;
        keyframe frames are not included.
        """
        yield from _iter_declarations(self.rules)

    @property
    def keyframes(self) -> list[KeyframesRule]:
        return [r for r in self.rules if isinstance(r, KeyframesRule)]


def _iter_declarations(nodes: tuple[Node, ...]) -> Iterator[Declaration]:
    for node in nodes:
        if isinstance(node, Rule):
            yield from node.properties
        elif isinstance(node, GroupRule):
            yield from _iter_declarations(node.rules)
        elif isinstance(node, AtRule) and node.declarations:
            yield from (d for d in node.declarations if isinstance(d, Declaration))
