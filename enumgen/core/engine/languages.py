"""
Tree-sitter language objects and parser construction.
"""
import logging
from functools import lru_cache

import tree_sitter_go
from tree_sitter import Language, Parser

logger = logging.getLogger(__name__)

GO_LANGUAGE = Language(tree_sitter_go.language())

LANGUAGES = {
    'go': GO_LANGUAGE,
}

@lru_cache(maxsize=None)
def get_parser(language_code: str) -> Parser:
    """Return a parser for ``language_code``, creating it on first use."""
    language = LANGUAGES.get(language_code.lower())
    if language is None:
        raise ValueError(f"Unsupported language: {language_code}")
    logger.debug(f"Creating tree-sitter parser for {language_code}")
    return Parser(language)
