"""
Unit tests for Lexicon queries.
"""

import pytest

from polarity.lexicon.models import Lexicon


class TestAuxiliaries:
    """Tests for auxiliary tables."""

    def test_polarity(self, lexicon):
        """Verify positive and negative auxiliaries."""
        assert lexicon.is_positive_auxiliary("is")
        assert lexicon.is_negative_auxiliary("isn't")
        assert lexicon.is_negative_modal("cannot")
        assert lexicon.opposite_auxiliary("hasn't") == "has"

    def test_do_is_not_table_inverted(self, lexicon):
        """Verify do-forms are outside the table-lookup auxiliaries."""
        assert lexicon.is_form_of_do("does")
        assert not lexicon.is_positive_auxiliary("does")


class TestVerbForms:
    """Tests for verb-form queries."""

    def test_be_forms(self, lexicon):
        """Verify irregular be-forms are tagged."""
        assert lexicon.is_infinitive("be")
        assert lexicon.is_past_participle("been")
        assert lexicon.is_gerund("being")
        assert lexicon.infinitive_of("was") == "be"
        assert lexicon.third_person_of("be") == "is"

    def test_same_tense(self, lexicon):
        """Verify tense comparison."""
        assert lexicon.same_tense("sings", "dances")
        assert not lexicon.same_tense("sings", "danced")

    def test_be_participle_and_gerund_are_verbs(self, lexicon):
        """Verify "been" and "being" count as verbs."""
        assert lexicon.is_verb("been")
        assert lexicon.is_verb("Being,")

    def test_none_safe(self, lexicon):
        """Verify form lookups accept None."""
        assert lexicon.third_person_of(None) is None
        assert lexicon.perfect_of(None) is None

    def test_two_part_verb(self, lexicon):
        """Verify "trash talk" yields its noun half."""
        assert lexicon.two_part_verb(["They", "trash", "talk"], 2) == "trash"
        assert lexicon.two_part_verb(["They", "trash", "talks"], 2) == "trash"
        assert lexicon.two_part_verb(["They", "talk"], 1) is None
        assert lexicon.two_part_verb(["talk"], 0) is None

    def test_start_stop(self, lexicon):
        """Verify start/stop pairs."""
        assert lexicon.opposite_start_stop("started") == "stopped"
        assert lexicon.opposite_start_stop("stops") == "starts"


class TestWordClasses:
    """Tests for nouns, names and pronouns."""

    def test_possession(self, lexicon):
        """Verify possessive names."""
        assert lexicon.is_possession("John's")
        assert not lexicon.is_possession("dog's")
        assert not lexicon.is_possession("'s")

    def test_indefinite_pronouns(self, lexicon):
        """Verify every-/no- pronoun swaps."""
        assert lexicon.opposite_indefinite("Everybody") == "nobody"
        assert lexicon.opposite_negative_indefinite("nothing") == "something"

    def test_question_words(self, lexicon):
        """Verify the three interrogative groups."""
        assert lexicon.is_skip_question_word("When")
        assert lexicon.is_push_question_word("what")
        assert lexicon.is_question_word("why")
        assert not lexicon.is_question_word("dog")

    def test_phrases(self, lexicon):
        """Verify skip phrases in all three placements."""
        assert lexicon.is_skip_phrase(["last", "year"], 0)
        assert lexicon.is_skip_phrase(["for", "fear"], 1)
        assert lexicon.is_skip_phrase(["according", "to", "them"], 2)
        assert not lexicon.is_skip_phrase(["last"], 0)


class TestEmptyLexicon:
    """Tests for a Lexicon built without data."""

    def test_defaults(self):
        """Verify every table defaults to an empty, read-only mapping."""
        first, second = Lexicon(), Lexicon()
        assert dict(first.verb_forms) == {}
        assert not first.is_verb("go")
        assert first.opposite_auxiliary("will") is None
        assert first.infinitives is not second.infinitives
        with pytest.raises(TypeError):
            first.positive_modals["will"] = "won't"
