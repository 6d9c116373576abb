"""
Unit tests for post-inversion clean-ups.
"""

from polarity.grammar.clearance import check_not_but, check_some_any, clear_after, verb_after
from polarity.ir.enums import PolarityShift


class TestClearAfter:
    """Tests for dropping adverbs next to the inverted verb."""

    def test_deletes_before(self, lexicon):
        """Verify "already know" loses "already"."""
        words = ["I", "already", "know."]
        clear_after(words, 2, lexicon)
        assert words == ["I", "", "know."]

    def test_deletes_after(self, lexicon):
        """Verify "know now" loses "now"."""
        words = ["I", "know", "now."]
        clear_after(words, 1, lexicon)
        assert words == ["I", "know", ""]

    def test_leaves_other_words(self, lexicon):
        """Verify ordinary neighbours stay."""
        words = ["I", "really", "know."]
        clear_after(words, 2, lexicon)
        assert words == ["I", "really", "know."]


class TestVerbAfter:
    """Tests for the verb look-ahead."""

    def test_verb_after(self, lexicon):
        """Verify any later verb counts."""
        words = ["I", "like", "it."]
        assert verb_after(words, 0, lexicon)
        assert not verb_after(words, 1, lexicon)


class TestCompanionWords:
    """Tests for not/but and some/any."""

    def test_some_to_any(self, lexicon, make_clause):
        """Verify "some" becomes "any" when negating."""
        words = ["I", "have", "some", "money."]
        clause = make_clause(words, positions=[1])
        clause.mark(PolarityShift.TO_NEGATIVE)
        check_some_any(words, clause, lexicon)
        assert words[2] == "any"

    def test_any_to_some(self, lexicon, make_clause):
        """Verify "any" becomes "some" when affirming."""
        words = ["I", "have", "any", "money."]
        clause = make_clause(words, positions=[1])
        clause.mark(PolarityShift.TO_POSITIVE)
        check_some_any(words, clause, lexicon)
        assert words[2] == "some"

    def test_not_to_but(self, lexicon, make_clause):
        """Verify "a man not a child" becomes "a man but a child"."""
        words = ["He", "is", "a", "man", "not", "a", "child."]
        clause = make_clause(words, positions=[1])
        clause.mark(PolarityShift.TO_NEGATIVE)
        check_not_but(words, clause, lexicon)
        assert words[4] == "but"

    def test_but_to_not(self, lexicon, make_clause):
        """Verify "a man but a child" becomes "a man not a child"."""
        words = ["He", "is", "a", "man", "but", "a", "child."]
        clause = make_clause(words, positions=[1])
        clause.mark(PolarityShift.TO_POSITIVE)
        check_not_but(words, clause, lexicon)
        assert words[4] == "not"

    def test_unmarked_clause_untouched(self, lexicon, make_clause):
        """Verify nothing changes without a polarity shift."""
        words = ["I", "have", "some", "money."]
        check_some_any(words, make_clause(words, positions=[1]), lexicon)
        assert words[2] == "some"
