"""Token group locator: finds ``@tokens`` marker comments in a stylesheet."""

from __future__ import annotations

import logging

from csstokens.config import ExtractorConfig
from csstokens.errors import CommentParseError
from csstokens.model.stylesheet import Comment, Stylesheet
from csstokens.model.tokens import LineRange, TokenGroup
from csstokens.parser.comments import CommentBlock, parse_comment

logger = logging.getLogger(__name__)


def _parse_marker(comment: Comment, stylesheet: Stylesheet) -> CommentBlock:
    # The parsed comment text excludes its delimiters; restore them.
    try:
        return parse_comment(f"/*{comment.text}*/")
    except CommentParseError as exc:
        raise CommentParseError(
            str(exc),
            line=comment.position.start_line,
            filename=stylesheet.filename,
        ) from exc


def locate_token_groups(
    stylesheet: Stylesheet, config: ExtractorConfig | None = None
) -> list[TokenGroup]:
    """Return one empty TokenGroup per top-level marker comment, in order.

    A group spans from its marker comment to the line before the next marker,
    or to the end of the file (``end=None``) for the last one.
    """
    config = config or ExtractorConfig()
    markers = [
        node
        for node in stylesheet.rules
        if isinstance(node, Comment) and config.marker in node.text
    ]

    groups: list[TokenGroup] = []
    for index, comment in enumerate(markers):
        block = _parse_marker(comment, stylesheet)
        tokens_tag = block.find(config.token_marker)
        if tokens_tag is None:
            raise CommentParseError(
                f"Comment mentions {config.marker} but does not start a "
                f"{config.marker} tag line",
                line=comment.position.start_line,
                filename=stylesheet.filename,
            )
        presenter = block.find(config.presenter_tag)
        end = markers[index + 1].position.start_line - 1 if index + 1 < len(markers) else None
        groups.append(
            TokenGroup(
                label=tokens_tag.source.replace(config.marker, "", 1).strip(),
                position=LineRange(start=comment.position.start_line, end=end),
                presenter=presenter.name if presenter else None,
                filename=stylesheet.filename,
            )
        )

    logger.debug(
        "Located %d token group(s) in %s", len(groups), stylesheet.filename or "<string>"
    )
    return groups
