"""
Lexical analyzer for lolmark source

Turns raw source text into an ordered sequence of tokens in a single
left-to-right pass.

Rules:
- Whitespace (space, tab, CR, LF) ends the pending lexeme and is dropped
- '#' ends the pending lexeme and starts a special token, which greedily
  takes ASCII alphanumerics and the URL characters : / . ? = & - %
- A special token must be a keyword or an http URL, otherwise lexing
  stops with a LexicalError
- Any other character extends the pending lexeme

Example:
    >>> Lexer().tokenize("#HAI Hello, world! #KTHXBYE")
    ('#HAI', 'Hello,', 'world!', '#KTHXBYE')
"""

from typing import List, Tuple

from ..models.keywords import special_isValid
from .errors import LexicalError
from .log import LOG

WHITESPACE = frozenset(' \t\r\n')
SPECIAL_PREFIX = '#'
URL_CHARS = frozenset(':/.?=&-%')


class Lexer:
    """
    Tokenizer for lolmark source text

    Holds the scan position and the pending lexeme. A Lexer may be reused;
    each tokenize() call starts from a clean state.
    """

    def __init__(self) -> None:
        self.source = ""
        self.position = 0
        self.lexeme: List[str] = []
        self.tokens: List[str] = []

    def char_get(self) -> str:
        """Return the next character and advance, or "" at end of input"""
        if self.position < len(self.source):
            ch = self.source[self.position]
            self.position += 1
            return ch
        return ""

    def char_add(self, ch: str) -> None:
        """Append a character to the pending lexeme"""
        self.lexeme.append(ch)

    def lexeme_flush(self) -> None:
        """Emit the pending lexeme as a plain token, if there is one"""
        if self.lexeme:
            self.tokens.append(''.join(self.lexeme))
            self.lexeme = []

    @staticmethod
    def specialChar_is(ch: str) -> bool:
        """Check if a character may continue a special token"""
        return (ch.isascii() and ch.isalnum()) or ch in URL_CHARS

    def special_scan(self) -> str:
        """
        Scan a special token starting at the '#' just consumed

        Returns:
            The validated special token

        Raises:
            LexicalError: If the token is neither a keyword nor an http URL
        """
        start = self.position - 1
        while self.position < len(self.source) and self.specialChar_is(self.source[self.position]):
            self.position += 1

        token = self.source[start:self.position]
        if not special_isValid(token):
            raise LexicalError(token)
        return token

    def tokenize(self, source: str) -> Tuple[str, ...]:
        """
        Tokenize the entire source

        Args:
            source: Raw lolmark source text

        Returns:
            Tuple of tokens in source order (empty for blank source)

        Raises:
            LexicalError: On the first invalid special token; no partial
                          token stream is returned
        """
        self.source = source
        self.position = 0
        self.lexeme = []
        self.tokens = []

        while True:
            ch = self.char_get()
            if not ch:
                break

            if ch in WHITESPACE:
                self.lexeme_flush()
            elif ch == SPECIAL_PREFIX:
                self.lexeme_flush()
                self.tokens.append(self.special_scan())
            else:
                self.char_add(ch)

        self.lexeme_flush()

        LOG(f"Lexer produced {len(self.tokens)} tokens", level=3)
        return tuple(self.tokens)


def tokenize(source: str) -> Tuple[str, ...]:
    """Tokenize source with a fresh Lexer"""
    return Lexer().tokenize(source)
