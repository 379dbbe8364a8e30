"""Keyframe extractor: re-emits every ``@keyframes`` rule as CSS text."""

from __future__ import annotations

from typing import Iterable

from csstokens.model.stylesheet import Stylesheet
from csstokens.parser.serializer import serialize_stylesheet


def extract_keyframes(stylesheets: Iterable[Stylesheet]) -> str:
    """Concatenate the serialized keyframes of every stylesheet, in order."""
    return "".join(
        serialize_stylesheet(Stylesheet(rules=tuple(sheet.keyframes), filename=sheet.filename))
        for sheet in stylesheets
    )
