from csstokens.model.stylesheet import (
    AtRule,
    Comment,
    Declaration,
    GroupRule,
    Keyframe,
    KeyframesRule,
    Node,
    Position,
    Rule,
    Stylesheet,
)
from csstokens.model.tokens import (
    ExtractionResult,
    HardCodedMatch,
    LineRange,
    Occurrence,
    SourceFile,
    Token,
    TokenGroup,
)

__all__ = [
    "AtRule",
    "Comment",
    "Declaration",
    "GroupRule",
    "Keyframe",
    "KeyframesRule",
    "Node",
    "Position",
    "Rule",
    "Stylesheet",
    "ExtractionResult",
    "HardCodedMatch",
    "LineRange",
    "Occurrence",
    "SourceFile",
    "Token",
    "TokenGroup",
]
