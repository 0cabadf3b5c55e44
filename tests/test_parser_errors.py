"""
Parser error tests - stop at first error

Tests token mismatches, unknown constructs, invalid text and truncated
sources. Every error ends the parse; nothing is recovered.
"""

import pytest

from lolmark.lib.lexer import tokenize
from lolmark.lib.parser import Parser
from lolmark.lib.errors import (
    CompileError,
    InvalidTextError,
    LolSyntaxError,
    TokenMismatchError,
    UnexpectedConstructError,
)


def parse(source: str, lists_enabled: bool = False) -> str:
    return Parser(tokenize(source), diagnostics=lambda message: None, lists_enabled=lists_enabled).parse()


class TestTokenMismatch:
    """Test token_match failures"""

    def test_missing_hai(self):
        """Documents must open with #HAI"""
        with pytest.raises(TokenMismatchError) as excinfo:
            parse("Hello #KTHXBYE")
        assert excinfo.value.expected == "#HAI"
        assert excinfo.value.found == "Hello"
        assert str(excinfo.value) == "Syntax Error: Expected '#HAI', found 'Hello'"

    def test_missing_kthxbye(self):
        """Running out of input before #KTHXBYE fails"""
        with pytest.raises(TokenMismatchError) as excinfo:
            parse("#HAI Hello")
        assert excinfo.value.expected == "#KTHXBYE"
        assert excinfo.value.found == ""

    def test_paragraph_requires_paragraf(self):
        """#MAEK in the body must open a paragraph"""
        with pytest.raises(TokenMismatchError, match="PARAGRAF"):
            parse("#HAI x #MAEK STUFF #OIC #KTHXBYE")

    def test_leading_paragraph_read_as_head(self):
        """A #MAEK right after #HAI is always taken as the head"""
        with pytest.raises(TokenMismatchError) as excinfo:
            parse("#HAI #MAEK PARAGRAF x #OIC #KTHXBYE")
        assert excinfo.value.expected == "HEAD"
        assert excinfo.value.found == "PARAGRAF"

    def test_list_rejected_when_disabled(self):
        """Without lists enabled, #MAEK LIST is a paragraph mismatch"""
        with pytest.raises(TokenMismatchError) as excinfo:
            parse("#HAI x #MAEK LIST #GIMMEH ITEM a #MKAY #OIC #KTHXBYE")
        assert excinfo.value.expected == "PARAGRAF"
        assert excinfo.value.found == "LIST"

    def test_variable_define_requires_it_iz(self):
        """#I HAZ NAME must be followed by #IT IZ"""
        with pytest.raises(TokenMismatchError, match="#IT"):
            parse("#HAI #I HAZ X IZ hi #MKAY #KTHXBYE")

    def test_media_requires_single_url(self):
        """SOUNDZ takes exactly one token before #MKAY"""
        with pytest.raises(TokenMismatchError, match="#MKAY"):
            parse("#HAI #GIMMEH SOUNDZ a.mp3 b.mp3 #MKAY #KTHXBYE")

    def test_list_item_requires_item(self):
        """List entries must be #GIMMEH ITEM"""
        with pytest.raises(TokenMismatchError, match="ITEM"):
            parse("#HAI x #MAEK LIST #GIMMEH BOLD a #MKAY #OIC #KTHXBYE", lists_enabled=True)


class TestTruncatedSource:
    """Test scan-until-terminator loops at end of input"""

    @pytest.mark.parametrize(
        "source, expected",
        [
            ("#HAI #OBTW never closed", "#TLDR"),
            ("#HAI #MAEK HEAD #GIMMEH TITLE never ends", "#MKAY"),
            ("#HAI #MAEK HEAD no oic", "#OIC"),
            ("#HAI #I HAZ X #IT IZ forever", "#MKAY"),
            ("#HAI #GIMMEH BOLD forever", "#MKAY"),
            ("#HAI #GIMMEH ITALICS forever", "#MKAY"),
            ("#HAI x #MAEK PARAGRAF forever", "#OIC"),
        ],
    )
    def test_truncated_construct(self, source, expected):
        """Missing terminators fail with an empty 'found' token"""
        with pytest.raises(TokenMismatchError) as excinfo:
            parse(source)
        assert excinfo.value.expected == expected
        assert excinfo.value.found == ""


class TestUnexpectedConstruct:
    """Test unknown #GIMMEH constructs"""

    def test_title_in_body(self):
        """TITLE is only valid inside the head"""
        with pytest.raises(UnexpectedConstructError) as excinfo:
            parse("#HAI #GIMMEH TITLE x #MKAY #KTHXBYE")
        assert excinfo.value.token == "TITLE"

    def test_item_outside_list(self):
        """ITEM is only valid inside a list"""
        with pytest.raises(UnexpectedConstructError):
            parse("#HAI #GIMMEH ITEM x #MKAY #KTHXBYE", lists_enabled=True)

    def test_gimmeh_at_end(self):
        """#GIMMEH with nothing after it"""
        with pytest.raises(UnexpectedConstructError):
            parse("#HAI #GIMMEH")


class TestNonAsciiKeywords:
    """Test that keywords only ignore ASCII case"""

    def test_dotless_i_is_not_iz(self):
        """'ıZ' upper-cases to 'IZ' in Unicode but is not the keyword"""
        with pytest.raises(TokenMismatchError) as excinfo:
            parse("#HAI #I HAZ X #IT ıZ hi #MKAY #LEMME SEE X #MKAY #KTHXBYE")
        assert excinfo.value.expected == "IZ"
        assert excinfo.value.found == "ıZ"

    def test_long_s_is_not_see(self):
        """'ſEE' upper-cases to 'SEE' in Unicode but is not the keyword"""
        with pytest.raises(TokenMismatchError) as excinfo:
            parse("#HAI #I HAZ X #IT IZ hi #MKAY #LEMME ſEE X #MKAY #KTHXBYE")
        assert excinfo.value.expected == "SEE"
        assert excinfo.value.found == "ſEE"

    def test_dotless_i_is_not_italics(self):
        """A non-ASCII construct name after #GIMMEH is unknown"""
        with pytest.raises(UnexpectedConstructError) as excinfo:
            parse("#HAI #GIMMEH ıTALICS x #MKAY #KTHXBYE")
        assert excinfo.value.token == "ıTALICS"

    def test_ascii_case_still_ignored(self):
        """Lower-case ASCII keywords keep matching"""
        assert parse("#HAI #i haz X #it iz hi #mkay #lemme see X #mkay #KTHXBYE") == "hi </body></html>"


class TestInvalidText:
    """Test plain text validation"""

    def test_non_ascii(self):
        """Plain text must be ASCII"""
        with pytest.raises(InvalidTextError) as excinfo:
            parse("#HAI héllo #KTHXBYE")
        assert excinfo.value.token == "héllo"
        assert str(excinfo.value) == "Syntax Error: Expected text, found 'héllo'"

    def test_stray_keyword(self):
        """A keyword outside its construct is not text"""
        with pytest.raises(InvalidTextError):
            parse("#HAI #OIC #KTHXBYE")

    def test_stray_url_token(self):
        """'#http...' passes the lexer but is not text"""
        with pytest.raises(InvalidTextError):
            parse("#HAI #https://example.com #KTHXBYE")


class TestErrorHierarchy:
    """Test error types"""

    def test_syntax_errors_are_builtin_syntax_errors(self):
        """Grammar errors can be caught as SyntaxError"""
        with pytest.raises(SyntaxError):
            parse("nope")

    def test_all_errors_are_compile_errors(self):
        """Everything derives from CompileError"""
        assert issubclass(LolSyntaxError, CompileError)
        with pytest.raises(CompileError):
            parse("#HAI #LEMME SEE nobody #MKAY #KTHXBYE")
