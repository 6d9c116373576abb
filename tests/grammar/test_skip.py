"""
Unit tests for the false-positive filter.
"""

from polarity.grammar import skip


class TestSkipRules:
    """One test group per veto rule."""

    def test_participle_after_gerund(self, lexicon, make_clause):
        """Verify "being seen" vetoes "seen"."""
        words = ["being", "seen"]
        assert skip.participle_after_gerund(words, make_clause(words), 1, lexicon)

    def test_article_before(self, lexicon, make_clause):
        """Verify "the post" vetoes "post"."""
        words = ["The", "post", "ended."]
        assert skip.article_before(words, make_clause(words), 1, lexicon)

    def test_article_before_name(self, lexicon, make_clause):
        """Verify "the Smith report" vetoes "report"."""
        words = ["the", "Smith", "report"]
        assert skip.article_before(words, make_clause(words), 2, lexicon)

    def test_singular_subject_with_infinitive(self, lexicon, make_clause):
        """Verify "The dog bark" is not a clause."""
        words = ["The", "dog", "bark."]
        assert skip.false_positive(words, make_clause(words), 2, lexicon)

    def test_plural_subject_with_third_person(self, lexicon, make_clause):
        """Verify "The dogs barks" is not a clause."""
        words = ["The", "dogs", "barks."]
        assert skip.false_positive(words, make_clause(words), 2, lexicon)

    def test_agreement_passes(self, lexicon, make_clause):
        """Verify "The dogs bark" is accepted."""
        words = ["The", "dogs", "bark."]
        assert not skip.false_positive(words, make_clause(words), 2, lexicon)

    def test_nouns_joined_with_and(self, lexicon, make_clause):
        """Verify "John and Mary like" is accepted."""
        words = ["John", "and", "Mary", "like", "it."]
        assert not skip.false_positive(words, make_clause(words), 3, lexicon)

    def test_that_verb(self, lexicon, make_clause):
        """Verify "claim that is" vetoes "claim"."""
        words = ["They", "claim", "that", "is", "fine."]
        assert skip.false_positive(words, make_clause(words), 1, lexicon)

    def test_possessive_before(self, lexicon, make_clause):
        """Verify "John's work" vetoes "work"."""
        words = ["John's", "work", "ended."]
        assert skip.false_positive(words, make_clause(words), 1, lexicon)

    def test_false_positive_only_without_verb(self, lexicon, make_clause):
        """Verify the rule is off once the clause has a verb."""
        words = ["I", "will", "go."]
        clause = make_clause(words, positions=[1])
        assert not skip.false_positive(words, clause, 2, lexicon)

    def test_conjunction_before_unresolved_clause(self, lexicon, make_clause):
        """Verify a verb after a conjunction waits for the clause to resolve."""
        words = ["Cats", "and", "work"]
        assert skip.conjunction_before(words, make_clause(words), 2, lexicon)

    def test_conjunction_before_after_change(self, lexicon, make_clause):
        """Verify a changed sentence lets the verb through when it can attach."""
        words = ["Cats", "and", "work"]
        clause = make_clause(words)
        clause.flags.changed = True
        assert not skip.conjunction_before(words, clause, 2, lexicon)

    def test_conjunction_before_replaces_level(self, lexicon, make_clause):
        """Verify "will stay or go" keeps "go"."""
        words = ["I", "will", "stay", "or", "go."]
        clause = make_clause(words, positions=[1, 2])
        assert not skip.conjunction_before(words, clause, 4, lexicon)

    def test_conjunction_before_incompatible(self, lexicon, make_clause):
        """Verify "will stay and went" vetoes "went"."""
        words = ["I", "will", "stay", "and", "went."]
        clause = make_clause(words, positions=[1, 2])
        assert skip.conjunction_before(words, clause, 4, lexicon)

    def test_adjective_before(self, lexicon, make_clause):
        """Verify "new post" vetoes "post"."""
        words = ["The", "new", "post"]
        assert skip.adjective_before(words, make_clause(words), 2, lexicon)

    def test_first_place_error(self, lexicon, make_clause):
        """Verify sentence-initial verbs."""
        for words, expected in [
            (["Sleeps", "well."], True),
            (["Go", "home."], False),
            (["Go", "see", "it."], True),
            (["Will", "you", "go?"], False),
        ]:
            assert skip.first_place_error(words, make_clause(words), 0, lexicon) is expected

    def test_of_after(self, lexicon, make_clause):
        """Verify "end of" vetoes "end"."""
        words = ["the", "end", "of", "it"]
        assert skip.of_after(words, make_clause(words), 1, lexicon)
        words = ["the", "end."]
        assert not skip.of_after(words, make_clause(words), 1, lexicon)

    def test_skip_phrase(self, lexicon, make_clause):
        """Verify "last night" vetoes "last"."""
        words = ["He", "left", "last", "night."]
        assert skip.skip_phrase(words, make_clause(words), 2, lexicon)

    def test_pronoun_before(self, lexicon, make_clause):
        """Verify "my work" vetoes "work"."""
        words = ["I", "did", "my", "work."]
        assert skip.pronoun_before(words, make_clause(words), 3, lexicon)

    def test_preposition_before(self, lexicon, make_clause):
        """Verify "in love" vetoes "love"."""
        words = ["in", "love"]
        assert skip.preposition_before(words, make_clause(words), 1, lexicon)
        assert not skip.preposition_before(words, make_clause(words), 0, lexicon)

    def test_participle_with_by(self, lexicon, make_clause):
        """Verify passive "loved by" and "loved most by"."""
        words = ["It", "was", "loved", "by", "all."]
        assert skip.participle_with_by(words, make_clause(words), 2, lexicon)
        words = ["It", "was", "loved", "most", "by", "all."]
        assert skip.participle_with_by(words, make_clause(words), 2, lexicon)

    def test_gerund_before(self, lexicon, make_clause):
        """Verify a token after a gerund is vetoed."""
        words = ["being", "seen"]
        assert skip.gerund_before(words, make_clause(words), 1, lexicon)

    def test_adjacent_names(self, lexicon, make_clause):
        """Verify names next to names are proper nouns."""
        words = ["John", "Smith"]
        assert skip.adjacent_names(words, make_clause(words), 0, lexicon)
        words = ["John", "left."]
        assert not skip.adjacent_names(words, make_clause(words), 0, lexicon)


class TestShouldSkip:
    """Tests for the combined filter."""

    def test_plain_verb_passes(self, lexicon, make_clause):
        """Verify "She sleeps" keeps its verb."""
        words = ["She", "sleeps."]
        clause = make_clause(words)
        assert not skip.should_skip(words, clause, 1, lexicon)
        assert skip.firing_rule(words, clause, 1, lexicon) is None

    def test_reports_first_rule(self, lexicon, make_clause):
        """Verify the first vetoing rule is named."""
        words = ["The", "post", "ended."]
        clause = make_clause(words)
        assert skip.should_skip(words, clause, 1, lexicon)
        assert skip.firing_rule(words, clause, 1, lexicon) == "article_before"

    def test_rules_in_order(self):
        """Verify every rule is registered once."""
        names = [rule.__name__ for rule in skip.SKIP_RULES]
        assert len(names) == len(set(names)) == 13
