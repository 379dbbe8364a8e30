"""Error types raised while parsing stylesheets and resolving tokens."""

from __future__ import annotations


class ExtractionError(Exception):
    """Base class for every failure that aborts a token extraction."""


class ParseError(ExtractionError):
    """Raised when CSS source (or a doc comment inside it) cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        filename: str | None = None,
    ):
        self.line = line
        self.column = column
        self.filename = filename
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.filename is None:
            return message
        location = self.filename
        if self.line is not None:
            location = f"{location}:{self.line}"
        return f"{location}: {message}"


class CommentParseError(ParseError):
    """Raised when a documentation comment is structurally malformed."""


class ResolutionError(ExtractionError):
    """Raised when a ``var()`` value does not have the ``var(--name)`` shape."""

    def __init__(
        self,
        message: str,
        filename: str | None = None,
        line: int | None = None,
        name: str = "",
        value: str = "",
    ):
        self.filename = filename
        self.line = line
        self.name = name
        self.value = value
        super().__init__(message)

    def __str__(self) -> str:
        location = f"{self.filename or '<string>'}:{self.line}"
        return f"{location}: {self.name}: {super().__str__()} ({self.value!r})"
