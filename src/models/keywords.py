"""
Keyword table for lolmark source

Defines the fixed set of recognized keywords and their categories. The
lexer validates every '#'-prefixed token against this table; the Pygments
highlighter uses the categories to pick token types.
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional


class KeywordCategory(Enum):
    """
    Categories of lolmark keywords

    Used for highlighting and documentation only; the grammar itself does
    not consult categories.
    """
    STRUCTURAL = "structural"    # #HAI, #KTHXBYE, #OBTW, #TLDR
    BLOCK = "block"              # #MAEK, #OIC, HEAD, PARAGRAF, LIST
    INLINE = "inline"            # #GIMMEH, #MKAY, BOLD, ITALICS, NEWLINE, TITLE, ITEM
    VARIABLE = "variable"        # #I, HAZ, #IT, IZ, #LEMME, SEE
    MEDIA = "media"              # SOUNDZ, VIDZ


KEYWORD_CATEGORIES: Dict[str, KeywordCategory] = {
    '#HAI': KeywordCategory.STRUCTURAL,
    '#KTHXBYE': KeywordCategory.STRUCTURAL,
    '#OBTW': KeywordCategory.STRUCTURAL,
    '#TLDR': KeywordCategory.STRUCTURAL,
    '#MAEK': KeywordCategory.BLOCK,
    '#OIC': KeywordCategory.BLOCK,
    'HEAD': KeywordCategory.BLOCK,
    'PARAGRAF': KeywordCategory.BLOCK,
    'LIST': KeywordCategory.BLOCK,
    '#GIMMEH': KeywordCategory.INLINE,
    '#MKAY': KeywordCategory.INLINE,
    'TITLE': KeywordCategory.INLINE,
    'BOLD': KeywordCategory.INLINE,
    'ITALICS': KeywordCategory.INLINE,
    'NEWLINE': KeywordCategory.INLINE,
    'ITEM': KeywordCategory.INLINE,
    '#I': KeywordCategory.VARIABLE,
    'HAZ': KeywordCategory.VARIABLE,
    '#IT': KeywordCategory.VARIABLE,
    'IZ': KeywordCategory.VARIABLE,
    '#LEMME': KeywordCategory.VARIABLE,
    'SEE': KeywordCategory.VARIABLE,
    'SOUNDZ': KeywordCategory.MEDIA,
    'VIDZ': KeywordCategory.MEDIA,
}

# Every recognized keyword, upper-cased
KEYWORDS: FrozenSet[str] = frozenset(KEYWORD_CATEGORIES)

# Special tokens starting with this prefix pass the lexer unvalidated
URL_PREFIX = 'http'

# Maps a-z to A-Z only; non-ASCII letters are left as they are
_ASCII_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def ascii_upper(token: str) -> str:
    """
    Upper-case the ASCII letters of a token, leaving everything else alone

    Example:
        >>> ascii_upper("#mkay")
        '#MKAY'
    """
    return token.translate(_ASCII_UPPER)


def keyword_is(token: str) -> bool:
    """Check if a token is a keyword (case-insensitive)"""
    return ascii_upper(token) in KEYWORDS


def keyword_category(token: str) -> Optional[KeywordCategory]:
    """
    Get the category of a keyword

    Args:
        token: Token text, any case

    Returns:
        KeywordCategory, or None if the token is not a keyword

    Example:
        >>> keyword_category('#gimmeh')
        <KeywordCategory.INLINE: 'inline'>
    """
    return KEYWORD_CATEGORIES.get(ascii_upper(token))


def special_isValid(token: str) -> bool:
    """
    Check if a '#'-prefixed token may appear in the token stream

    A special token is valid when it is a keyword or starts with the
    literal URL prefix, with or without the leading '#' (so embedded
    links such as '#https://...' pass).
    """
    if keyword_is(token):
        return True
    return token.startswith(URL_PREFIX) or token[1:].startswith(URL_PREFIX)
