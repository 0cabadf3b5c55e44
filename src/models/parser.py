"""
Parser-specific data models

Type-safe structures for the grammar driver's state and the compiler's
return value.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..lib.cursor import TokenCursor


@dataclass
class ParserState:
    """
    Mutable state of one compilation run

    Owned by exactly one Parser and threaded through every production.

    Attributes:
        cursor: Token cursor over the lexed source
        variables: Symbol table, variable name → value. Redefinition
                   overwrites; there is no scoping and no deletion.
        html: Append-only list of HTML fragments
        title: Page title, once a #GIMMEH TITLE has been parsed
    """
    cursor: 'TokenCursor'
    variables: Dict[str, str] = field(default_factory=dict)
    html: List[str] = field(default_factory=list)
    title: Optional[str] = None

    def html_get(self) -> str:
        """Join the HTML buffer into the output document"""
        return ''.join(self.html)


@dataclass
class CompileResult:
    """
    Result of compiling one lolmark source

    Returned by Compiler.compile().

    Attributes:
        html: The complete HTML document
        tokens: Token sequence produced by the lexer
        variables: Final symbol table
        title: Page title, or None if the source had no head title
        diagnostics: Diagnostic lines emitted while parsing

    Example:
        For source "#HAI #I HAZ X #IT IZ hi #MKAY #LEMME SEE X #MKAY #KTHXBYE":
        CompileResult(
            html="hi </body></html>",
            tokens=("#HAI", "#I", "HAZ", "X", ...),
            variables={"X": "hi"},
            title=None,
            diagnostics=[]
        )
    """
    html: str
    tokens: Tuple[str, ...]
    variables: Dict[str, str]
    title: Optional[str] = None
    diagnostics: List[str] = field(default_factory=list)
