"""Cross-file index of custom-property declarations.

Built once per extraction, after every file has been parsed, and shared
read-only by the resolution of every token group.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from csstokens.model.stylesheet import Declaration, Stylesheet


@dataclass(frozen=True)
class IndexedDeclaration:
    """A custom-property declaration and the file it came from."""

    declaration: Declaration
    filename: str | None

    @property
    def name(self) -> str:
        return self.declaration.name

    @property
    def value(self) -> str:
        return self.declaration.value


class DeclarationIndex:
    """Custom-property declarations of all files, by name and by value.

    Declarations keep file order, then document order, so lookups return the
    first declaration of a name just like a linear scan would.
    """

    def __init__(self, declarations: Iterable[IndexedDeclaration] = ()) -> None:
        self._declarations: tuple[IndexedDeclaration, ...] = tuple(declarations)
        self._by_name: dict[str, list[IndexedDeclaration]] = {}
        self._by_value: dict[str, list[IndexedDeclaration]] = {}
        for item in self._declarations:
            self._by_name.setdefault(item.name, []).append(item)
            self._by_value.setdefault(item.value, []).append(item)

    @classmethod
    def build(cls, stylesheets: Iterable[Stylesheet]) -> "DeclarationIndex":
        return cls(
            IndexedDeclaration(declaration=declaration, filename=sheet.filename)
            for sheet in stylesheets
            for declaration in sheet.iter_declarations()
            if declaration.is_custom_property
        )

    def __iter__(self) -> Iterator[IndexedDeclaration]:
        return iter(self._declarations)

    def __len__(self) -> int:
        return len(self._declarations)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def lookup(self, name: str) -> IndexedDeclaration | None:
        """Return the first declaration of custom property *name*, if any."""
        matches = self._by_name.get(name)
        return matches[0] if matches else None

    def aliases_of(self, name: str) -> tuple[str, ...]:
        """Names of custom properties whose value is exactly ``var(name)``."""
        matches = self._by_value.get(f"var({name})", [])
        return tuple(dict.fromkeys(item.name for item in matches))
