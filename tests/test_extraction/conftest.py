from pathlib import Path

import pytest

from csstokens.model.stylesheet import Stylesheet
from csstokens.model.tokens import SourceFile
from csstokens.parser import parse_stylesheet

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture()
def tokens_css() -> SourceFile:
    return SourceFile("tokens.css", (FIXTURES / "tokens.css").read_text())


@pytest.fixture()
def components_css() -> SourceFile:
    return SourceFile("components.css", (FIXTURES / "components.css").read_text())


@pytest.fixture()
def stylesheets(tokens_css: SourceFile, components_css: SourceFile) -> list[Stylesheet]:
    return [
        parse_stylesheet(tokens_css.content, filename=tokens_css.filename),
        parse_stylesheet(components_css.content, filename=components_css.filename),
    ]
