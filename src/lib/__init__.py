"""
lolmark - LOLCODE-flavoured markup to HTML compiler

Lexer, grammar driver and compiler facade.
"""

__version__ = "1.0.0"

from .lexer import Lexer, tokenize
from .cursor import TokenCursor
from .parser import Parser
from .compiler import Compiler, compile_source
from .errors import (
    CompileError,
    InputError,
    LexicalError,
    LolSyntaxError,
    TokenMismatchError,
    UnexpectedConstructError,
    InvalidTextError,
    SemanticError,
    UndefinedVariableError,
)
from .log import LOG, state_connectToLogger

__all__ = [
    "Lexer",
    "tokenize",
    "TokenCursor",
    "Parser",
    "Compiler",
    "compile_source",
    "CompileError",
    "InputError",
    "LexicalError",
    "LolSyntaxError",
    "TokenMismatchError",
    "UnexpectedConstructError",
    "InvalidTextError",
    "SemanticError",
    "UndefinedVariableError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
