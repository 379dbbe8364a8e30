"""Extract design tokens documented with ``@tokens`` comments from CSS."""

__version__ = "0.1.0"

from csstokens.config import ExtractorConfig  # noqa: E402
from csstokens.errors import (  # noqa: E402
    CommentParseError,
    ExtractionError,
    ParseError,
    ResolutionError,
)
from csstokens.extraction import CssTokenExtractor, extract  # noqa: E402
from csstokens.model import (  # noqa: E402
    ExtractionResult,
    HardCodedMatch,
    SourceFile,
    Token,
    TokenGroup,
)

__all__ = [
    "__version__",
    "CommentParseError",
    "CssTokenExtractor",
    "ExtractionError",
    "ExtractionResult",
    "ExtractorConfig",
    "HardCodedMatch",
    "ParseError",
    "ResolutionError",
    "SourceFile",
    "Token",
    "TokenGroup",
    "extract",
]
