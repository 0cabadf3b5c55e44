"""
Compilation errors for lolmark

Every error is fatal: the first one raised stops the compilation and no
partial HTML is produced. Only the CLI boundary turns an error into a
diagnostic on stderr and a non-zero exit status.

Hierarchy:
    CompileError
    ├── InputError
    ├── LexicalError
    ├── LolSyntaxError (also a builtin SyntaxError)
    │   ├── TokenMismatchError
    │   ├── UnexpectedConstructError
    │   └── InvalidTextError
    └── SemanticError
        └── UndefinedVariableError
"""


class CompileError(Exception):
    """Base class for all lolmark compilation errors"""

    label = "Error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return f"{self.label}: {self.message}"


class InputError(CompileError):
    """Raised when there is nothing to compile (empty or whitespace-only source)"""

    label = "Input Error"


class LexicalError(CompileError):
    """
    Raised when the lexer meets a '#'-prefixed token that is neither a
    keyword nor an http URL

    Attributes:
        token: The offending special token (e.g., "#FOO")
    """

    label = "Lexical Error"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid token '{token}'")


class LolSyntaxError(CompileError, SyntaxError):
    """
    Base class for grammar errors

    Subclasses the builtin SyntaxError as well, so code that already
    catches SyntaxError around a parse keeps working.
    """

    label = "Syntax Error"


class TokenMismatchError(LolSyntaxError):
    """
    Raised when the current token is not the one the grammar requires

    Attributes:
        expected: Keyword the production required
        found: Token actually present ("" at end of input)
    """

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"Expected '{expected}', found '{found}'")


class UnexpectedConstructError(LolSyntaxError):
    """Raised when #GIMMEH is followed by an unknown construct"""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown GIMMEH construct '{token}'")


class InvalidTextError(LolSyntaxError):
    """Raised when plain text starts with '#' or contains non-ASCII characters"""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Expected text, found '{token}'")


class SemanticError(CompileError):
    """Base class for errors in otherwise well-formed source"""

    label = "Semantic Error"


class UndefinedVariableError(SemanticError):
    """
    Raised when a variable is used before any definition

    Attributes:
        name: The undefined variable name
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Undefined variable '{name}'")
