"""
Lexer tests - tokenization and special token validation

Tests whitespace splitting, '#' special tokens, URL passthrough and
lexical errors.
"""

import pytest

from lolmark.lib.lexer import Lexer, tokenize
from lolmark.lib.errors import LexicalError
from lolmark.models.keywords import keyword_is, keyword_category, KeywordCategory


class TestEmptyAndSimple:
    """Test empty source and simplest token streams"""

    def test_empty_source(self):
        """Empty string produces no tokens"""
        assert tokenize("") == ()

    def test_whitespace_only(self):
        """Only whitespace produces no tokens"""
        assert tokenize("   \n\n  \t \r\n ") == ()

    def test_minimal_document(self):
        """Keywords and plain words in order"""
        assert tokenize("#HAI Hello #KTHXBYE") == ("#HAI", "Hello", "#KTHXBYE")

    def test_all_whitespace_kinds_split(self):
        """Tabs, CR and LF all separate tokens"""
        assert tokenize("#GIMMEH\tBOLD\r\nbig\ncat") == ("#GIMMEH", "BOLD", "big", "cat")

    def test_punctuation_stays_attached(self):
        """Punctuation is only split off by whitespace"""
        assert tokenize("Hello, world !") == ("Hello,", "world", "!")


class TestSpecialTokens:
    """Test '#'-prefixed token scanning"""

    def test_hash_flushes_pending_lexeme(self):
        """A '#' ends the plain word before it"""
        assert tokenize("abc#MKAY") == ("abc", "#MKAY")

    def test_special_token_stops_at_non_url_char(self):
        """A comma is not a URL character, so it starts a new lexeme"""
        assert tokenize("#MKAY, next") == ("#MKAY", ",", "next")

    def test_keywords_case_insensitive(self):
        """Lower-case keywords are accepted and keep their spelling"""
        assert tokenize("#hai #Kthxbye") == ("#hai", "#Kthxbye")

    def test_url_passthrough(self):
        """'#' followed by an http URL is accepted"""
        tokens = tokenize("#https://example.com/a?b=1&c=2%20x")
        assert tokens == ("#https://example.com/a?b=1&c=2%20x",)

    def test_plain_url_is_plain_token(self):
        """URLs without '#' are ordinary tokens"""
        assert tokenize("https://example.com/cat.mp3") == ("https://example.com/cat.mp3",)

    def test_non_ascii_ends_special_token(self):
        """Only ASCII alphanumerics continue a special token"""
        assert tokenize("#HAIé") == ("#HAI", "é")


class TestLexicalErrors:
    """Test invalid special tokens"""

    def test_unknown_keyword(self):
        """#FOO is neither a keyword nor a URL"""
        with pytest.raises(LexicalError) as excinfo:
            tokenize("#HAI #FOO #KTHXBYE")
        assert excinfo.value.token == "#FOO"
        assert str(excinfo.value) == "Lexical Error: Invalid token '#FOO'"

    def test_trailing_url_char_makes_invalid_token(self):
        """'.' is a URL character, so '#MKAY.' is one invalid token"""
        with pytest.raises(LexicalError, match=r"#MKAY\."):
            tokenize("word #MKAY.")

    def test_lone_hash(self):
        """A bare '#' is invalid"""
        with pytest.raises(LexicalError):
            tokenize("# HAI")

    def test_bare_keywords_not_validated(self):
        """Words without '#' are never checked against the keyword table"""
        assert tokenize("FOO BAR") == ("FOO", "BAR")


class TestLexerState:
    """Test reuse and stability"""

    def test_lexer_reuse(self):
        """Each tokenize() call starts from a clean state"""
        lexer = Lexer()
        assert lexer.tokenize("one two") == ("one", "two")
        assert lexer.tokenize("three") == ("three",)

    def test_lexer_reuse_after_error(self):
        """A failed tokenize() does not leak into the next one"""
        lexer = Lexer()
        with pytest.raises(LexicalError):
            lexer.tokenize("dangling #NOPE")
        assert lexer.tokenize("#HAI") == ("#HAI",)

    def test_idempotent(self):
        """Re-tokenizing the space-joined tokens gives the same tokens"""
        source = "#HAI\n  #MAEK HEAD #GIMMEH TITLE Hi! #MKAY #OIC\nHello , world #KTHXBYE"
        tokens = tokenize(source)
        assert tokenize(" ".join(tokens)) == tokens


class TestKeywordTable:
    """Test keyword lookup"""

    def test_keyword_is_case_insensitive(self):
        """Lookup ignores case"""
        assert keyword_is("#gimmeh")
        assert keyword_is("paragraf")
        assert not keyword_is("#FOO")

    def test_keyword_is_ascii_only(self):
        """Non-ASCII letters never fold onto a keyword"""
        assert not keyword_is("ıZ")
        assert not keyword_is("ſEE")
        assert keyword_category("ıTALICS") is None

    def test_list_keywords_present(self):
        """LIST and ITEM are part of the table"""
        assert keyword_is("LIST")
        assert keyword_is("ITEM")

    def test_keyword_category(self):
        """Categories are reported for keywords only"""
        assert keyword_category("#hai") == KeywordCategory.STRUCTURAL
        assert keyword_category("SOUNDZ") == KeywordCategory.MEDIA
        assert keyword_category("cat") is None
