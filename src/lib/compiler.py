"""
Compiler for lolmark source to HTML

Runs the whole pipeline for one source text:
    source → Lexer → TokenCursor → Parser (symbol table + HTML buffer) → HTML

The compiler is pure: it neither reads nor writes files. The CLI hands it
the source text and persists the returned HTML.
"""

from typing import List, Optional

from ..models.parser import CompileResult
from .errors import InputError
from .lexer import Lexer
from .log import LOG, diagnostic_emit
from .parser import DiagnosticSink, Parser


class Compiler:
    """
    Compiles lolmark source text to an HTML document

    Responsibilities:
    - Tokenize the source
    - Reject empty input before parsing
    - Drive the grammar and collect the generated HTML
    - Capture diagnostics emitted while parsing

    Each compile() call uses a fresh lexer, cursor, symbol table and
    buffer, so one Compiler can be reused for many sources.
    """

    def __init__(
        self,
        diagnostics: Optional[DiagnosticSink] = None,
        lists_enabled: Optional[bool] = None,
    ) -> None:
        """
        Initialize compiler

        Args:
            diagnostics: Sink that also receives every diagnostic line
                         (defaults to LOG())
            lists_enabled: Accept "#MAEK LIST" blocks (defaults to the
                           lists_enabled application setting)
        """
        self.diagnostics = diagnostics or diagnostic_emit
        self.lists_enabled = lists_enabled

    def compile(self, source: str) -> CompileResult:
        """
        Compile source text to HTML

        Args:
            source: Full lolmark source text

        Returns:
            CompileResult with the HTML document, tokens, variables,
            title and collected diagnostics

        Raises:
            InputError: If the source contains no tokens
            LexicalError: On an invalid special token
            LolSyntaxError: On any grammar violation
            UndefinedVariableError: On use of an undefined variable
        """
        LOG("Tokenizing source...", level=2)
        tokens = Lexer().tokenize(source)
        if not tokens:
            raise InputError("Empty input file.")

        collected: List[str] = []

        def diagnostic_capture(message: str) -> None:
            collected.append(message)
            self.diagnostics(message)

        LOG(f"Parsing {len(tokens)} tokens...", level=2)
        parser = Parser(
            tokens,
            diagnostics=diagnostic_capture,
            lists_enabled=self.lists_enabled,
        )
        html = parser.parse()
        LOG(f"Generated {len(html)} characters of HTML", level=2)

        return CompileResult(
            html=html,
            tokens=tokens,
            variables=dict(parser.state.variables),
            title=parser.state.title,
            diagnostics=collected,
        )


def compile_source(source: str, lists_enabled: Optional[bool] = None) -> str:
    """
    Compile source text and return just the HTML document

    Example:
        >>> compile_source("#HAI Hello world #KTHXBYE")
        'Hello world </body></html>'
    """
    return Compiler(lists_enabled=lists_enabled).compile(source).html
