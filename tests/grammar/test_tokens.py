"""
Unit tests for token helpers and restyle.
"""

from polarity.grammar.chars import is_allowed_pair, is_special
from polarity.grammar.tokens import (
    DELETED,
    clean,
    has_comma,
    is_adverb,
    is_quote_token,
    join_tokens,
    opens_quote,
    restyle,
)


class TestClean:
    """Tests for token cleaning."""

    def test_strips_punctuation_and_lowercases(self):
        """Verify special characters go and case is folded."""
        assert clean("Sleeps.") == "sleeps"
        assert clean("(Will") == "will"

    def test_keeps_apostrophes(self):
        """Verify contractions survive cleaning."""
        assert clean("Don't!") == "don't"

    def test_empty(self):
        """Verify the empty token stays empty."""
        assert clean("") == ""


class TestRestyle:
    """Tests for restyle casing and punctuation."""

    def test_capitalized(self):
        """Verify a capitalized original gives a capitalized replacement."""
        assert restyle("Everybody", "nobody") == "Nobody"

    def test_all_caps(self):
        """Verify an all-caps original gives an all-caps replacement."""
        assert restyle("WILL", "won't") == "WON'T"

    def test_lower(self):
        """Verify mixed case falls back to lower case."""
        assert restyle("wILL", "Won't") == "won't"

    def test_trailing_punctuation(self):
        """Verify trailing punctuation is carried over."""
        assert restyle("sleeps.", "doesn't sleep") == "doesn't sleep."

    def test_double_trailing_and_leading(self):
        """Verify a leading special and two trailing ones are carried over."""
        assert restyle("(word).", "other") == "(other)."

    def test_delete(self):
        """Verify deleting a plain token leaves nothing."""
        assert restyle("not", DELETED) == ""


class TestTokenPredicates:
    """Tests for small token predicates."""

    def test_join_skips_deleted(self):
        """Verify deleted tokens do not leave double spaces."""
        assert join_tokens(["I", "", "go."]) == "I go."

    def test_adverb(self):
        """Verify the -ly heuristic."""
        assert is_adverb("really")
        assert is_adverb("hereby")
        assert not is_adverb("go")

    def test_comma(self):
        """Verify a comma-terminated token is recognised."""
        assert has_comma("dogs,")
        assert not has_comma(",")
        assert not has_comma("dogs")

    def test_quotes(self):
        """Verify quote detection."""
        assert is_quote_token('"Hello')
        assert is_quote_token('there"')
        assert opens_quote('"Hello')
        assert not opens_quote('there"')


class TestChars:
    """Tests for character classes."""

    def test_special(self):
        """Verify punctuation, brackets and quotes are special."""
        for char in ".,;:!?()[]{}\"'&-/":
            assert is_special(char)
        assert not is_special("a")

    def test_allowed_pairs(self):
        """Verify punctuation next to a closer is allowed, two marks are not."""
        assert is_allowed_pair(".", ")")
        assert is_allowed_pair(")", ".")
        assert is_allowed_pair(":", "/")
        assert not is_allowed_pair(",", ",")
        assert not is_allowed_pair("?", "!")
