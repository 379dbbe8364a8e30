from csstokens.extraction.extractor import CssTokenExtractor, extract
from csstokens.extraction.hardcoded import find_hard_coded_values, value_contains_token
from csstokens.extraction.index import DeclarationIndex, IndexedDeclaration
from csstokens.extraction.keyframes import extract_keyframes
from csstokens.extraction.locator import locate_token_groups
from csstokens.extraction.resolver import resolve_token_group, resolve_value

__all__ = [
    "CssTokenExtractor",
    "DeclarationIndex",
    "IndexedDeclaration",
    "extract",
    "extract_keyframes",
    "find_hard_coded_values",
    "locate_token_groups",
    "resolve_token_group",
    "resolve_value",
    "value_contains_token",
]
