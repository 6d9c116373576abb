"""
Unit tests for contraction expansion.
"""

import pytest

from polarity.grammar.contractions import expand_contractions, expansion_for


class TestExpansionFor:
    """Tests for single-token expansion."""

    @pytest.mark.parametrize(
        "words,expected",
        [
            (["I'm", "happy."], "am"),
            (["We'll", "see."], "will"),
            (["You're", "late."], "are"),
            (["I've", "seen", "it."], "have"),
            (["She's", "gone."], "has"),
            (["She's", "nice."], "is"),
            (["They'd", "gone."], "had"),
            (["They'd", "like", "it."], "would"),
        ],
    )
    def test_pronoun_contractions(self, lexicon, words, expected):
        """Verify each suffix, with the participle look-ahead for 's and 'd."""
        assert expansion_for(words, 0, lexicon) == expected

    def test_leaves_possessives_and_negations(self, lexicon):
        """Verify "John's" and "don't" are untouched."""
        assert expansion_for(["John's", "dog"], 0, lexicon) is None
        assert expansion_for(["don't"], 0, lexicon) is None
        assert expansion_for(["dog"], 0, lexicon) is None


class TestExpandContractions:
    """Tests for whole-text expansion."""

    def test_expands_in_place(self, lexicon):
        """Verify every contraction becomes two tokens."""
        text = "I'm happy and you're sad."
        assert expand_contractions(text, lexicon) == "I am happy and you are sad."

    def test_keeps_prefix_casing(self, lexicon):
        """Verify the pronoun keeps its casing."""
        assert expand_contractions("It's fine.", lexicon) == "It is fine."

    def test_participle_two_ahead(self, lexicon):
        """Verify "'s" reads as "has" with an adverb before the participle."""
        assert expand_contractions("He's never gone.", lexicon) == "He has never gone."
