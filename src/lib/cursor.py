"""
Token cursor

Wraps a token sequence with a current position. Reading past the end
never fails: the cursor collapses to the empty token and stays there.
"""

from typing import Sequence, Tuple

EMPTY_TOKEN = ""


class TokenCursor:
    """
    Position over an immutable token sequence

    Attributes:
        tokens: The token sequence being walked
        position: Index of the current token
    """

    def __init__(self, tokens: Sequence[str]) -> None:
        self.tokens: Tuple[str, ...] = tuple(tokens)
        self.position = 0
        self.token = self.tokens[0] if self.tokens else EMPTY_TOKEN

    def current(self) -> str:
        """Return the current token without moving ("" once exhausted)"""
        return self.token

    def advance(self) -> str:
        """
        Move to the next token and return it

        At the last token (or beyond) the current token becomes "" and the
        position does not move; further calls keep returning "".
        """
        if self.position + 1 < len(self.tokens):
            self.position += 1
            self.token = self.tokens[self.position]
        else:
            self.token = EMPTY_TOKEN
        return self.token

    def set(self, token: str) -> None:
        """Overwrite the current token without moving the position"""
        self.token = token

    @property
    def exhausted(self) -> bool:
        """True once the current token is the empty token"""
        return self.token == EMPTY_TOKEN
