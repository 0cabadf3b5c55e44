"""
Custom Pygments lexer for lolmark syntax highlighting

Provides syntax highlighting for lolmark source when rendering a source
listing next to the compiled page.

Token types:
- Comment.Multiline: #OBTW ... #TLDR blocks
- Keyword.Declaration: Structural keywords (#HAI, #KTHXBYE)
- Keyword: Block keywords (#MAEK, #OIC, HEAD, PARAGRAF, LIST)
- Name.Function: Inline keywords (#GIMMEH, #MKAY, BOLD, ...)
- Name.Variable: Variable keywords (#I HAZ, #IT IZ, #LEMME SEE)
- Name.Builtin: Media keywords (SOUNDZ, VIDZ)
- String.Other: URLs
- Punctuation: . , ! ?
- Text: Everything else
"""

import re
from typing import Optional

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import RegexLexer, words
from pygments.token import (
    Text,
    Whitespace,
    Punctuation,
    Name,
    String,
    Keyword,
    Comment,
)

from ..models.keywords import KEYWORD_CATEGORIES, KeywordCategory


def keywords_match(category: KeywordCategory) -> words:
    """Build a words() matcher for all keywords in one category"""
    names = [k for k, v in KEYWORD_CATEGORIES.items() if v == category]
    return words(names, suffix=r'(?!\S)')


class LolmarkLexer(RegexLexer):
    """
    Lexer for lolmark markup

    Keywords are matched case-insensitively, like the compiler does.

    Example:
        #HAI #GIMMEH BOLD hai #MKAY #KTHXBYE

    Tokens:
        #HAI → Keyword.Declaration
        #GIMMEH → Name.Function
        BOLD → Name.Function
        hai → Text
        #KTHXBYE → Keyword.Declaration
    """

    name = 'Lolmark'
    aliases = ['lolmark', 'lol']
    filenames = ['*.lol']
    mimetypes = ['text/x-lolmark']
    flags = re.MULTILINE | re.IGNORECASE

    tokens = {
        'root': [
            (r'\s+', Whitespace),

            # Comment block - everything until #TLDR is comment text
            (r'#OBTW(?!\S)', Comment.Multiline, 'comment'),

            (keywords_match(KeywordCategory.STRUCTURAL), Keyword.Declaration),
            (keywords_match(KeywordCategory.BLOCK), Keyword),
            (keywords_match(KeywordCategory.INLINE), Name.Function),
            (keywords_match(KeywordCategory.VARIABLE), Name.Variable),
            (keywords_match(KeywordCategory.MEDIA), Name.Builtin),

            # Links, with or without the '#' prefix
            (r'#?https?://\S+', String.Other),

            # Standalone punctuation tokens
            (r'[.,!?](?!\S)', Punctuation),

            # Everything else is text
            (r'\S+', Text),
        ],

        'comment': [
            (r'#TLDR(?!\S)', Comment.Multiline, '#pop'),
            (r'\s+', Comment.Multiline),
            (r'\S+', Comment.Multiline),
        ],
    }


def get_lexer() -> LolmarkLexer:
    """
    Get the LolmarkLexer instance

    Returns:
        LolmarkLexer instance ready for use with Pygments
    """
    return LolmarkLexer()


def listing_render(source: str, style: str = "default", title: Optional[str] = None) -> str:
    """
    Render lolmark source as a standalone, highlighted HTML page

    Args:
        source: Raw lolmark source text
        style: Pygments style name
        title: Page title for the listing (defaults to "lolmark source")

    Returns:
        Complete HTML document with inline styles and line numbers
    """
    formatter = HtmlFormatter(
        style=style,
        full=True,
        linenos="table",
        title=title or "lolmark source",
    )
    return highlight(source, get_lexer(), formatter)
