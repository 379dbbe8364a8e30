"""Hard-coded value detector.

Reports ordinary declarations whose value repeats a token's literal value
instead of referencing the token.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from csstokens.model.stylesheet import Declaration, Stylesheet
from csstokens.model.tokens import HardCodedMatch, Occurrence, Token


def value_contains_token(declaration_value: str, token_value: str) -> bool:
    """Return True if *declaration_value* repeats *token_value*.

    Plain substring containment: ``10px`` also matches inside ``110px``.
    """
    return bool(declaration_value) and token_value in declaration_value


def _candidates(stylesheets: Iterable[Stylesheet]) -> list[tuple[str, Declaration]]:
    return [
        (sheet.filename or "", declaration)
        for sheet in stylesheets
        for declaration in sheet.iter_declarations()
        if not declaration.is_custom_property
    ]


def find_hard_coded_values(
    tokens: Sequence[Token], stylesheets: Iterable[Stylesheet]
) -> list[HardCodedMatch]:
    """Return a match for every token with at least one hard-coded occurrence.

    Occurrences follow file order, then document order; a (file, line) pair
    is reported at most once per token.
    """
    candidates = _candidates(stylesheets)
    matches: list[HardCodedMatch] = []
    for token in tokens:
        occurrences: dict[tuple[str, int], Occurrence] = {}
        for filename, declaration in candidates:
            if not value_contains_token(declaration.value, token.value):
                continue
            line = declaration.position.start_line
            occurrences.setdefault(
                (filename, line),
                Occurrence(file=filename, line=line, value=declaration.value),
            )
        if occurrences:
            matches.append(HardCodedMatch(token=token, occurrences=tuple(occurrences.values())))
    return matches
