"""
Grammar driver for lolmark

Predictive recursive-descent parser that validates the token stream and
emits HTML as it goes. There is no intermediate tree: each production
appends its HTML fragment to the output buffer the moment it is matched.

Grammar (quoted terminals match case-insensitively, TEXT is any plain token):

    Program    := "#HAI" {Comment} Head Body "#KTHXBYE"
    Comment    := "#OBTW" {ANY} "#TLDR"
    Head       := [ "#MAEK" "HEAD" {Title | ANY} "#OIC" ]
    Title      := "#GIMMEH" "TITLE" {TEXT} "#MKAY"
    Body       := {Paragraph | List | InlineForm}
    Paragraph  := "#MAEK" "PARAGRAF" {InlineForm} "#OIC"
    List       := "#MAEK" "LIST" {ListItem} "#OIC"            (lists_enabled)
    ListItem   := "#GIMMEH" "ITEM" {InlineForm} "#MKAY"
    InlineForm := "#GIMMEH" (Bold | Italics | Newline | Audio | Video)
                | VarUse | VarDefine | TEXT
    Bold       := "BOLD" {TEXT} "#MKAY"
    Italics    := "ITALICS" {TEXT} "#MKAY"
    Newline    := "NEWLINE"
    Audio      := "SOUNDZ" URL "#MKAY"
    Video      := "VIDZ" URL "#MKAY"
    VarDefine  := "#I" "HAZ" NAME "#IT" "IZ" {TEXT} "#MKAY"
    VarUse     := "#LEMME" "SEE" NAME "#MKAY"

Every production is one method. The first mismatch raises and ends the
compilation; there is no recovery and no backtracking.

Example:
    >>> parser = Parser(tokenize("#HAI Hello world #KTHXBYE"))
    >>> parser.parse()
    'Hello world </body></html>'
"""

from typing import Callable, List, Optional, Sequence

from ..models.keywords import ascii_upper
from ..models.parser import ParserState
from .cursor import TokenCursor
from .errors import (
    InvalidTextError,
    TokenMismatchError,
    UndefinedVariableError,
    UnexpectedConstructError,
)
from .log import LOG, diagnostic_emit

# Plain tokens emitted without a trailing space
PUNCTUATION = frozenset({'.', ',', '!', '?'})

DiagnosticSink = Callable[[str], None]


class Parser:
    """
    Recursive-descent parser and HTML emitter for lolmark

    Owns one ParserState (cursor, symbol table, HTML buffer). A Parser
    compiles exactly one token sequence; make a new one per compilation.
    """

    def __init__(
        self,
        tokens: Sequence[str],
        diagnostics: Optional[DiagnosticSink] = None,
        lists_enabled: Optional[bool] = None,
    ) -> None:
        """
        Initialize parser with a token sequence

        Args:
            tokens: Token sequence produced by the lexer
            diagnostics: Sink for human-readable progress lines (parsed
                         title, comments, media URLs). Defaults to LOG().
            lists_enabled: Accept "#MAEK LIST" blocks in the body. Defaults
                           to the lists_enabled application setting.
        """
        if lists_enabled is None:
            from ..config import appsettings
            lists_enabled = appsettings.lists_enabled

        self.state = ParserState(cursor=TokenCursor(tokens))
        self.diagnostics: DiagnosticSink = diagnostics or diagnostic_emit
        self.lists_enabled = lists_enabled

    @property
    def cursor(self) -> TokenCursor:
        """Token cursor owned by this parser's state"""
        return self.state.cursor

    def current(self) -> str:
        """Current token"""
        return self.state.cursor.current()

    def advance(self) -> str:
        """Move to the next token and return it"""
        return self.state.cursor.advance()

    def token_is(self, expected: str) -> bool:
        """Check the current token against a keyword (case-insensitive)"""
        return ascii_upper(self.current()) == ascii_upper(expected)

    def token_match(self, expected: str) -> None:
        """
        Consume the current token if it matches the expected keyword

        Raises:
            TokenMismatchError: If the current token is anything else
        """
        if not self.token_is(expected):
            raise TokenMismatchError(expected, self.current())
        self.advance()

    def tokens_collect(self, terminator: str) -> List[str]:
        """
        Consume tokens up to (not including) the terminator or end of input

        The caller matches the terminator itself, so running out of input
        surfaces as a TokenMismatchError there.
        """
        collected = []
        while not self.token_is(terminator) and not self.cursor.exhausted:
            collected.append(self.current())
            self.advance()
        return collected

    def html_write(self, content: str) -> None:
        """Append content to the HTML buffer"""
        self.state.html.append(content)

    def parse(self) -> str:
        """
        Parse the whole token sequence

        Returns:
            The generated HTML document

        Raises:
            LolSyntaxError: On any grammar violation
            UndefinedVariableError: On use of an undefined variable
        """
        self.program_parse()
        return self.state.html_get()

    def program_parse(self) -> None:
        """Program := "#HAI" {Comment} Head Body "#KTHXBYE" """
        self.token_match('#HAI')
        while self.token_is('#OBTW'):
            self.comment_parse()
        self.head_parse()
        self.body_parse()
        self.token_match('#KTHXBYE')

    def comment_parse(self) -> None:
        """Consume a #OBTW ... #TLDR block; nothing is emitted"""
        self.token_match('#OBTW')
        comment_text = ' '.join(self.tokens_collect('#TLDR'))
        self.token_match('#TLDR')
        self.diagnostics(f"Comment: {comment_text.strip()}")

    def head_parse(self) -> None:
        """
        Parse the optional head block

        Only #GIMMEH (a title) is recognized; any other token inside the
        head is skipped without complaint.
        """
        if not self.token_is('#MAEK'):
            return

        self.token_match('#MAEK')
        self.token_match('HEAD')
        while not self.token_is('#OIC') and not self.cursor.exhausted:
            if self.token_is('#GIMMEH'):
                self.title_parse()
            else:
                self.advance()
        self.token_match('#OIC')

    def title_parse(self) -> None:
        """Title := "#GIMMEH" "TITLE" {TEXT} "#MKAY" """
        self.token_match('#GIMMEH')
        self.token_match('TITLE')
        title_text = ' '.join(self.tokens_collect('#MKAY')).strip()
        self.token_match('#MKAY')

        self.state.title = title_text
        self.diagnostics(f"Parsed Title: {title_text}")
        self.html_write(f"<html><head><title>{title_text}</title></head><body>\n")

    def body_parse(self) -> None:
        """Parse body items until #KTHXBYE or end of input, then close the document"""
        while not self.token_is('#KTHXBYE') and not self.cursor.exhausted:
            token = ascii_upper(self.current())
            if token == '#MAEK':
                self.block_parse()
            elif token == '#GIMMEH':
                self.inline_parse()
            elif token == '#LEMME':
                self.variable_use()
            elif token == '#I':
                self.variable_define()
            else:
                self.text_parse()
        self.html_write("</body></html>")

    def block_parse(self) -> None:
        """
        Parse a #MAEK block in the body

        With lists enabled, "#MAEK LIST" opens a list; every other block
        must be a paragraph.
        """
        if not self.lists_enabled:
            self.paragraph_parse()
            return

        self.token_match('#MAEK')
        if self.token_is('LIST'):
            self.list_content()
        else:
            self.paragraph_content()

    def paragraph_parse(self) -> None:
        """Paragraph := "#MAEK" "PARAGRAF" {InlineForm} "#OIC" """
        self.token_match('#MAEK')
        self.paragraph_content()

    def paragraph_content(self) -> None:
        """Paragraph after its #MAEK"""
        self.token_match('PARAGRAF')
        self.html_write("<p>")
        while not self.token_is('#OIC') and not self.cursor.exhausted:
            self.inline_parse()
        self.html_write("</p>\n")
        self.token_match('#OIC')

    def list_content(self) -> None:
        """List := "#MAEK" "LIST" {ListItem} "#OIC", after its #MAEK"""
        self.token_match('LIST')
        self.html_write("<ul>\n")
        while self.token_is('#GIMMEH'):
            self.listItem_parse()
        self.html_write("</ul>\n")
        self.token_match('#OIC')

    def listItem_parse(self) -> None:
        """ListItem := "#GIMMEH" "ITEM" {InlineForm} "#MKAY" """
        self.token_match('#GIMMEH')
        self.token_match('ITEM')
        self.html_write("<li>")
        while not self.token_is('#MKAY') and not self.cursor.exhausted:
            self.inline_parse()
        self.html_write("</li>\n")
        self.token_match('#MKAY')

    def inline_parse(self) -> None:
        """
        Parse one inline form: a #GIMMEH construct, a variable, or text

        Raises:
            UnexpectedConstructError: If #GIMMEH is followed by an unknown
                                      construct
        """
        token = ascii_upper(self.current())
        if token == '#GIMMEH':
            self.advance()
            construct = ascii_upper(self.current())
            if construct == 'BOLD':
                self.bold_parse()
            elif construct == 'ITALICS':
                self.italics_parse()
            elif construct == 'NEWLINE':
                self.newline_parse()
            elif construct == 'SOUNDZ':
                self.audio_parse()
            elif construct == 'VIDZ':
                self.video_parse()
            else:
                raise UnexpectedConstructError(self.current())
        elif token == '#LEMME':
            self.variable_use()
        elif token == '#I':
            self.variable_define()
        else:
            self.text_parse()

    def styled_parse(self, keyword: str, tag: str) -> None:
        """Emit every token up to #MKAY, each followed by a space, inside <tag>"""
        self.token_match(keyword)
        self.html_write(f"<{tag}>")
        for token in self.tokens_collect('#MKAY'):
            self.html_write(f"{token} ")
        self.token_match('#MKAY')
        self.html_write(f"</{tag}>")

    def bold_parse(self) -> None:
        """Bold := "BOLD" {TEXT} "#MKAY" """
        self.styled_parse('BOLD', 'b')

    def italics_parse(self) -> None:
        """Italics := "ITALICS" {TEXT} "#MKAY" """
        self.styled_parse('ITALICS', 'i')

    def newline_parse(self) -> None:
        """Newline := "NEWLINE" """
        self.token_match('NEWLINE')
        self.html_write("<br/>\n")

    def media_parse(self, keyword: str) -> str:
        """Consume KEYWORD URL #MKAY and return the URL token"""
        self.token_match(keyword)
        address = self.current()
        self.advance()
        self.token_match('#MKAY')
        return address

    def audio_parse(self) -> None:
        """Audio := "SOUNDZ" URL "#MKAY" """
        address = self.media_parse('SOUNDZ')
        self.html_write(
            f'<audio controls>\n  <source src="{address}" type="audio/mpeg">\n</audio>\n'
        )
        self.diagnostics(f"Audio URL: {address}")

    def video_parse(self) -> None:
        """Video := "VIDZ" URL "#MKAY" """
        address = self.media_parse('VIDZ')
        self.html_write(
            f'<video controls>\n  <source src="{address}" type="video/mp4">\n</video>\n'
        )
        self.diagnostics(f"Video URL: {address}")

    def text_parse(self) -> None:
        """
        Emit one plain text token

        Punctuation (. , ! ?) is emitted as-is; every other token gets a
        single trailing space.

        Raises:
            InvalidTextError: If the token starts with '#' or is not ASCII
        """
        token = self.current()
        if not token or token.startswith('#') or not token.isascii():
            raise InvalidTextError(token)

        if token in PUNCTUATION:
            self.html_write(token)
        else:
            self.html_write(f"{token} ")
        self.advance()

    def variable_define(self) -> None:
        """
        VarDefine := "#I" "HAZ" NAME "#IT" "IZ" {TEXT} "#MKAY"

        The name is taken as-is; redefining a name overwrites it.
        """
        self.token_match('#I')
        self.token_match('HAZ')
        name = self.current()
        self.advance()
        self.token_match('#IT')
        self.token_match('IZ')
        value = ' '.join(self.tokens_collect('#MKAY')).strip()
        self.state.variables[name] = value
        self.token_match('#MKAY')
        LOG(f"Defined variable {name!r} = {value!r}", level=3)

    def variable_use(self) -> None:
        """
        VarUse := "#LEMME" "SEE" NAME "#MKAY"

        Raises:
            UndefinedVariableError: If NAME was never defined
        """
        self.token_match('#LEMME')
        self.token_match('SEE')
        name = self.current()
        self.advance()
        self.token_match('#MKAY')

        if name not in self.state.variables:
            raise UndefinedVariableError(name)
        self.html_write(f"{self.state.variables[name]} ")
