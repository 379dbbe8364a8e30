"""Extraction entry point: parses token files once and runs every pass."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence, Union

from csstokens.config import ExtractorConfig
from csstokens.extraction.hardcoded import find_hard_coded_values
from csstokens.extraction.index import DeclarationIndex
from csstokens.extraction.keyframes import extract_keyframes
from csstokens.extraction.locator import locate_token_groups
from csstokens.extraction.resolver import resolve_token_group
from csstokens.model.stylesheet import Stylesheet
from csstokens.model.tokens import ExtractionResult, SourceFile, TokenGroup
from csstokens.parser.transformer import parse_stylesheet

logger = logging.getLogger(__name__)

SourceLike = Union[SourceFile, Mapping[str, Any]]
TokenFiles = Mapping[str, Sequence[SourceLike]]


def _as_source_file(item: SourceLike) -> SourceFile:
    if isinstance(item, SourceFile):
        return item
    return SourceFile(filename=str(item["filename"]), content=str(item["content"]))


class CssTokenExtractor:
    """Extract token groups, hard-coded values and keyframes from CSS files.

    Every file is parsed exactly once. The cross-file declaration index is
    built only after all files have been parsed, so any parse failure
    aborts the whole call before resolution starts.
    """

    def __init__(self, config: ExtractorConfig | None = None) -> None:
        self.config = config or ExtractorConfig()

    def parse(self, token_files: TokenFiles | None) -> ExtractionResult:
        files = (token_files or {}).get(self.config.file_kind)
        if not files:
            logger.debug("No %r files to extract from", self.config.file_kind)
            return ExtractionResult()

        sources = [_as_source_file(item) for item in files]
        stylesheets = [parse_stylesheet(s.content, filename=s.filename) for s in sources]
        index = DeclarationIndex.build(stylesheets)

        token_groups = self._token_groups(stylesheets, index)
        tokens = [token for group in token_groups for token in group.tokens]
        result = ExtractionResult(
            hard_coded_values=find_hard_coded_values(tokens, stylesheets),
            keyframes=extract_keyframes(stylesheets),
            token_groups=token_groups,
        )
        logger.info(
            "Extracted %d token(s) in %d group(s) from %d file(s); %d hard-coded match(es)",
            len(tokens),
            len(token_groups),
            len(stylesheets),
            len(result.hard_coded_values),
        )
        return result

    def _token_groups(
        self, stylesheets: list[Stylesheet], index: DeclarationIndex
    ) -> list[TokenGroup]:
        return [
            resolve_token_group(group, sheet, index)
            for sheet in stylesheets
            for group in locate_token_groups(sheet, self.config)
        ]


def extract(
    token_files: TokenFiles | None, config: ExtractorConfig | None = None
) -> ExtractionResult:
    """Run a full extraction over *token_files* (file kind -> sources)."""
    return CssTokenExtractor(config).parse(token_files)
