from csstokens.errors import CommentParseError, ParseError
from csstokens.parser.comments import CommentBlock, Tag, parse_comment, parse_comment_tags
from csstokens.parser.serializer import serialize_node, serialize_stylesheet
from csstokens.parser.transformer import parse_stylesheet

__all__ = [
    "CommentBlock",
    "CommentParseError",
    "ParseError",
    "Tag",
    "parse_comment",
    "parse_comment_tags",
    "parse_stylesheet",
    "serialize_node",
    "serialize_stylesheet",
]
