"""Token catalogue model: groups, tokens, hard-coded values and the result."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SourceFile:
    """An already-loaded input file."""

    filename: str
    content: str


@dataclass(frozen=True)
class LineRange:
    """Inclusive line span of a token group; ``end=None`` means unbounded."""

    start: int
    end: int | None = None

    def contains(self, start: int, end: int) -> bool:
        """Return True if the span ``start..end`` lies fully inside this range."""
        if start < self.start:
            return False
        return self.end is None or end <= self.end

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True)
class Token:
    """A design token backed by a custom property.

    Attributes:
        key: Custom-property name, including the leading ``--``.
        value: Literal value, with at most one ``var()`` hop resolved.
        description: Text of the comment directly after the declaration.
        aliases: Custom properties (in any file) whose value is ``var(key)``.
        editable: Whether documentation tooling may offer to edit the value.
    """

    key: str
    value: str
    description: str = ""
    aliases: tuple[str, ...] = ()
    editable: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "aliases": list(self.aliases),
            "description": self.description,
            "editable": self.editable,
            "key": self.key,
            "value": self.value,
        }


@dataclass(frozen=True)
class TokenGroup:
    """A comment-delimited region of a stylesheet and the tokens it declares."""

    label: str
    position: LineRange
    presenter: str | None = None
    tokens: tuple[Token, ...] = ()
    filename: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "position": self.position.to_dict(),
            "presenter": self.presenter,
            "tokens": [t.to_dict() for t in self.tokens],
        }


@dataclass(frozen=True)
class Occurrence:
    """One ordinary declaration whose value repeats a token's value."""

    file: str
    line: int
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"file": self.file, "line": self.line, "value": self.value}


@dataclass(frozen=True)
class HardCodedMatch:
    """A token together with every hard-coded occurrence of its value."""

    token: Token
    occurrences: tuple[Occurrence, ...]

    @property
    def token_key(self) -> str:
        return self.token.key

    def to_dict(self) -> dict[str, Any]:
        return {
            "token": self.token.to_dict(),
            "values": [o.to_dict() for o in self.occurrences],
        }


@dataclass(frozen=True)
class ExtractionResult:
    """Everything extracted from one set of token files."""

    hard_coded_values: list[HardCodedMatch] = field(default_factory=list)
    keyframes: str = ""
    token_groups: list[TokenGroup] = field(default_factory=list)

    @property
    def tokens(self) -> list[Token]:
        """All tokens across all groups, in group order."""
        return [token for group in self.token_groups for token in group.tokens]

    def to_dict(self) -> dict[str, Any]:
        return {
            "hardCodedValues": [m.to_dict() for m in self.hard_coded_values],
            "keyframes": self.keyframes,
            "tokenGroups": [g.to_dict() for g in self.token_groups],
        }
