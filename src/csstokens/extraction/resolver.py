"""Token resolver: fills a located TokenGroup with its tokens.

Resolution follows at most one ``var()`` hop, looked up in the cross-file
:class:`DeclarationIndex`. Tokens whose value stays a ``var(--...)``
reference, and tokens that are aliases of another token in the same
group, are dropped.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from csstokens.errors import ResolutionError
from csstokens.extraction.index import DeclarationIndex
from csstokens.model.stylesheet import BlockItem, Comment, Declaration, Rule, Stylesheet
from csstokens.model.tokens import Token, TokenGroup

logger = logging.getLogger(__name__)

_REFERENCE_RE = re.compile(r"^var\((--.+)\)$")
_UNRESOLVED_RE = re.compile(r"^var\(--.+")


def find_declaring_rule(group: TokenGroup, stylesheet: Stylesheet) -> Rule | None:
    """Return the first top-level rule lying fully inside the group's range."""
    for node in stylesheet.rules:
        if isinstance(node, Rule) and group.position.contains(
            node.position.start_line, node.position.end_line
        ):
            return node
    return None


def describe_declarations(items: tuple[BlockItem, ...]) -> list[tuple[Declaration, str]]:
    """Pair every declaration with the comment that directly follows it."""
    described: list[tuple[Declaration, str]] = []
    for index, item in enumerate(items):
        if not isinstance(item, Declaration):
            continue
        following = items[index + 1] if index + 1 < len(items) else None
        description = following.text.replace("*", "").strip() if isinstance(following, Comment) else ""
        described.append((item, description))
    return described


def resolve_value(
    declaration: Declaration, index: DeclarationIndex, filename: str | None = None
) -> str:
    """Resolve a single ``var(--name)`` hop; other values pass through.

    A missing target leaves the ``var()`` text in place. A value that starts
    with ``var(`` but is not of the ``var(--name)`` shape raises
    :class:`ResolutionError`.
    """
    value = declaration.value
    if not value.startswith("var("):
        return value
    match = _REFERENCE_RE.match(value)
    if match is None:
        raise ResolutionError(
            "Cannot extract a custom-property reference",
            filename=filename,
            line=declaration.position.start_line,
            name=declaration.name,
            value=value,
        )
    target = index.lookup(match.group(1))
    return target.value if target is not None else value


def is_unresolved(value: str) -> bool:
    return _UNRESOLVED_RE.match(value) is not None


def resolve_token_group(
    group: TokenGroup, stylesheet: Stylesheet, index: DeclarationIndex
) -> TokenGroup:
    """Return *group* with its tokens populated from *stylesheet*."""
    rule = find_declaring_rule(group, stylesheet)
    if rule is None:
        logger.debug("Token group %r has no declaring rule", group.label)
        return replace(group, tokens=())

    candidates = [
        Token(
            key=declaration.name,
            value=resolve_value(declaration, index, stylesheet.filename),
            description=description,
            aliases=index.aliases_of(declaration.name),
        )
        for declaration, description in describe_declarations(rule.declarations)
        if declaration.is_custom_property
    ]

    tokens = tuple(
        token
        for token in candidates
        if not is_unresolved(token.value)
        and not any(
            other.key != token.key and token.key in other.aliases for other in candidates
        )
    )
    logger.debug(
        "Token group %r: %d of %d candidate(s) kept",
        group.label,
        len(tokens),
        len(candidates),
    )
    return replace(group, tokens=tokens)
