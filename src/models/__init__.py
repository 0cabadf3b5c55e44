"""
Models package for lolmark

Contains data structures and type definitions for the compilation pipeline.
"""

from .state import ProgramState, pipeline
from .keywords import KEYWORDS, KeywordCategory, keyword_is, keyword_category
from .parser import ParserState, CompileResult

__all__ = [
    "ProgramState",
    "pipeline",
    "KEYWORDS",
    "KeywordCategory",
    "keyword_is",
    "keyword_category",
    "ParserState",
    "CompileResult",
]
