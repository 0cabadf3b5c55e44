"""
lolmark - LOLCODE-flavoured markup to HTML compiler

Compiles keyword-delimited #HAI ... #KTHXBYE documents into HTML pages.
"""

__version__ = "1.0.0"

from .lib import Compiler, Parser, Lexer, compile_source, CompileError, LOG, state_connectToLogger

__all__ = [
    "Compiler",
    "Parser",
    "Lexer",
    "compile_source",
    "CompileError",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
