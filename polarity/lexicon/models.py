"""
Lexicon — immutable word-class and word-form lookups.

Every query cleans its argument first (special characters dropped,
lower-cased), so callers may pass raw tokens such as "Sleeps." or
"(Will".

A Lexicon is built once by the loader and then shared read-only by
every request and every worker thread.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from polarity.grammar.tokens import clean
from polarity.ir.enums import TENSE_FORMS, VerbForm

Phrase = tuple[str, str]


def _empty() -> Mapping[str, str]:
    return MappingProxyType({})


# Irregular be-forms the verb table does not carry
_SPECIAL_FORMS = {
    "be": VerbForm.INFINITIVE,
    "was": VerbForm.PERFECT,
    "were": VerbForm.PERFECT,
    "been": VerbForm.PARTICIPLE,
    "is": VerbForm.THIRD_PERSON,
    "being": VerbForm.GERUND,
}


@dataclass(frozen=True)
class Lexicon:
    """Read-only word lists and form tables."""

    # Verbs
    verb_forms: Mapping[str, frozenset[VerbForm]] = field(default_factory=_empty)
    infinitives: Mapping[str, str] = field(default_factory=_empty)
    third_persons: Mapping[str, str] = field(default_factory=_empty)
    perfects: Mapping[str, str] = field(default_factory=_empty)
    two_part_verbs: Mapping[str, str] = field(default_factory=_empty)
    start_stop: Mapping[str, str] = field(default_factory=_empty)
    clause_openers: frozenset[str] = frozenset()

    # Auxiliaries: positive -> negative and negative -> positive
    positive_modals: Mapping[str, str] = field(default_factory=_empty)
    negative_modals: Mapping[str, str] = field(default_factory=_empty)
    positive_do: Mapping[str, str] = field(default_factory=_empty)
    negative_do: Mapping[str, str] = field(default_factory=_empty)
    positive_be: Mapping[str, str] = field(default_factory=_empty)
    negative_be: Mapping[str, str] = field(default_factory=_empty)
    positive_have: Mapping[str, str] = field(default_factory=_empty)
    negative_have: Mapping[str, str] = field(default_factory=_empty)

    # Nouns
    singular_nouns: frozenset[str] = frozenset()
    plural_nouns: frozenset[str] = frozenset()
    articles: frozenset[str] = frozenset()
    names: frozenset[str] = frozenset()

    # Pronouns
    singular_pronouns: frozenset[str] = frozenset()
    plural_pronouns: frozenset[str] = frozenset()
    possessive_pronouns: frozenset[str] = frozenset()
    object_pronouns: frozenset[str] = frozenset()
    indefinite_pronouns: Mapping[str, str] = field(default_factory=_empty)
    negative_indefinite_pronouns: Mapping[str, str] = field(default_factory=_empty)

    # Function words
    prepositions: frozenset[str] = frozenset()
    sentence_conjunctions: frozenset[str] = frozenset()
    other_conjunctions: frozenset[str] = frozenset()
    skip_interrogatives: frozenset[str] = frozenset()
    push_interrogatives: frozenset[str] = frozenset()
    negate_interrogatives: frozenset[str] = frozenset()
    adjectives: frozenset[str] = frozenset()
    clean_up_words: tuple[str, ...] = ()

    # Two-word phrases
    current_next_phrases: tuple[Phrase, ...] = ()
    previous_current_phrases: tuple[Phrase, ...] = ()
    before_previous_phrases: tuple[Phrase, ...] = ()
    sub_sentence_phrases: tuple[Phrase, ...] = ()

    source: Optional[str] = field(default=None, compare=False)

    # -------------------------------------------------------------------------
    # Auxiliaries
    # -------------------------------------------------------------------------

    def is_positive_modal(self, word: str) -> bool:
        return clean(word) in self.positive_modals

    def is_negative_modal(self, word: str) -> bool:
        return clean(word) in self.negative_modals

    def is_modal(self, word: str) -> bool:
        w = clean(word)
        return w in self.positive_modals or w in self.negative_modals

    def is_positive_do(self, word: str) -> bool:
        return clean(word) in self.positive_do

    def is_negative_do(self, word: str) -> bool:
        return clean(word) in self.negative_do

    def is_form_of_do(self, word: str) -> bool:
        w = clean(word)
        return w in self.positive_do or w in self.negative_do

    def is_positive_be(self, word: str) -> bool:
        return clean(word) in self.positive_be

    def is_negative_be(self, word: str) -> bool:
        return clean(word) in self.negative_be

    def is_form_of_be(self, word: str) -> bool:
        w = clean(word)
        return w in self.positive_be or w in self.negative_be

    def is_positive_have(self, word: str) -> bool:
        return clean(word) in self.positive_have

    def is_negative_have(self, word: str) -> bool:
        return clean(word) in self.negative_have

    def is_form_of_have(self, word: str) -> bool:
        w = clean(word)
        return w in self.positive_have or w in self.negative_have

    def is_positive_auxiliary(self, word: str) -> bool:
        """Positive modal, be or have: inverted by table lookup."""
        return (
            self.is_positive_modal(word)
            or self.is_positive_be(word)
            or self.is_positive_have(word)
        )

    def is_negative_auxiliary(self, word: str) -> bool:
        return (
            self.is_negative_modal(word)
            or self.is_negative_be(word)
            or self.is_negative_have(word)
        )

    def opposite_auxiliary(self, word: str) -> Optional[str]:
        """Opposite-polarity form of a modal, be-form or have-form."""
        w = clean(word)
        for table in (
            self.positive_modals,
            self.negative_modals,
            self.positive_be,
            self.negative_be,
            self.positive_have,
            self.negative_have,
        ):
            if w in table:
                return table[w]
        return None

    # -------------------------------------------------------------------------
    # Verb forms
    # -------------------------------------------------------------------------

    def is_verb(self, word: str) -> bool:
        w = clean(word)
        return (
            w in self.verb_forms
            or w in _SPECIAL_FORMS
            or self.is_modal(w)
            or self.is_form_of_be(w)
            or self.is_form_of_do(w)
            or self.is_form_of_have(w)
        )

    def _has_form(self, word: str, form: VerbForm) -> bool:
        w = clean(word)
        if _SPECIAL_FORMS.get(w) is form:
            return True
        return form in self.verb_forms.get(w, ())

    def is_infinitive(self, word: str) -> bool:
        return self._has_form(word, VerbForm.INFINITIVE)

    def is_perfect(self, word: str) -> bool:
        return self._has_form(word, VerbForm.PERFECT)

    def is_past_participle(self, word: str) -> bool:
        return self._has_form(word, VerbForm.PARTICIPLE)

    def is_third_person(self, word: str) -> bool:
        return self._has_form(word, VerbForm.THIRD_PERSON)

    def is_gerund(self, word: str) -> bool:
        return self._has_form(word, VerbForm.GERUND)

    def classify(self, word: str) -> frozenset[VerbForm]:
        """All verb-form tags a word can carry (empty for non-verbs)."""
        tags = {form for form in TENSE_FORMS if self._has_form(word, form)}
        if self.is_modal(word):
            tags.add(VerbForm.MODAL)
        if self.is_form_of_do(word):
            tags.add(VerbForm.DO)
        if self.is_form_of_be(word):
            tags.add(VerbForm.BE)
        if self.is_form_of_have(word):
            tags.add(VerbForm.HAVE)
        return frozenset(tags)

    def same_tense(self, first: str, second: str) -> bool:
        """Both words share a tense category."""
        return any(
            self._has_form(first, form) and self._has_form(second, form)
            for form in TENSE_FORMS
        )

    def infinitive_of(self, word: str) -> Optional[str]:
        w = clean(word)
        if self.is_modal(w):
            return w
        if self.is_form_of_be(w):
            return "be"
        return self.infinitives.get(w)

    def third_person_of(self, infinitive: Optional[str]) -> Optional[str]:
        if infinitive is None:
            return None
        w = clean(infinitive)
        if w == "be":
            return "is"
        return self.third_persons.get(w)

    def perfect_of(self, infinitive: Optional[str]) -> Optional[str]:
        if infinitive is None:
            return None
        return self.perfects.get(clean(infinitive))

    def is_start_or_stop(self, word: str) -> bool:
        return clean(word) in self.start_stop

    def opposite_start_stop(self, word: str) -> Optional[str]:
        return self.start_stop.get(clean(word))

    def is_clause_opener(self, word: str) -> bool:
        """Verbs of saying and thinking that introduce a reported clause."""
        return clean(word) in self.clause_openers

    def two_part_verb(self, words: Sequence[str], position: int) -> Optional[str]:
        """
        Noun half of a two-word verb ending at `position`, if any.

        "trash talk" at the position of "talk" (or "talks") gives "trash".
        """
        if position <= 0:
            return None
        main = self.infinitive_of(words[position])
        if main is None:
            return None
        return self.two_part_verbs.get(f"{clean(words[position - 1])} {main}")

    # -------------------------------------------------------------------------
    # Nouns and pronouns
    # -------------------------------------------------------------------------

    def is_noun(self, word: str) -> bool:
        w = clean(word)
        return w in self.singular_nouns or w in self.plural_nouns

    def is_singular_noun(self, word: str) -> bool:
        return clean(word) in self.singular_nouns

    def is_plural_noun(self, word: str) -> bool:
        return clean(word) in self.plural_nouns

    def is_article(self, word: str) -> bool:
        return clean(word) in self.articles

    def is_name(self, word: str) -> bool:
        return clean(word) in self.names

    def is_possession(self, word: str) -> bool:
        """A name in the possessive ("John's")."""
        w = clean(word)
        return len(w) > 2 and w.endswith("'s") and w[:-2] in self.names

    def is_singular_pronoun(self, word: str) -> bool:
        return clean(word) in self.singular_pronouns

    def is_plural_pronoun(self, word: str) -> bool:
        return clean(word) in self.plural_pronouns

    def is_basic_pronoun(self, word: str) -> bool:
        w = clean(word)
        return w in self.singular_pronouns or w in self.plural_pronouns

    def is_possessive_pronoun(self, word: str) -> bool:
        return clean(word) in self.possessive_pronouns

    def is_object_pronoun(self, word: str) -> bool:
        return clean(word) in self.object_pronouns

    def is_indefinite_pronoun(self, word: str) -> bool:
        return clean(word) in self.indefinite_pronouns

    def opposite_indefinite(self, word: str) -> Optional[str]:
        return self.indefinite_pronouns.get(clean(word))

    def is_negative_indefinite(self, word: str) -> bool:
        return clean(word) in self.negative_indefinite_pronouns

    def opposite_negative_indefinite(self, word: str) -> Optional[str]:
        return self.negative_indefinite_pronouns.get(clean(word))

    # -------------------------------------------------------------------------
    # Function words
    # -------------------------------------------------------------------------

    def is_preposition(self, word: str) -> bool:
        return clean(word) in self.prepositions

    def is_sentence_conjunction(self, word: str) -> bool:
        return clean(word) in self.sentence_conjunctions

    def is_conjunction(self, word: str) -> bool:
        w = clean(word)
        return w in self.sentence_conjunctions or w in self.other_conjunctions

    def is_skip_question_word(self, word: str) -> bool:
        return clean(word) in self.skip_interrogatives

    def is_push_question_word(self, word: str) -> bool:
        return clean(word) in self.push_interrogatives

    def is_question_word(self, word: str) -> bool:
        w = clean(word)
        return (
            w in self.skip_interrogatives
            or w in self.push_interrogatives
            or w in self.negate_interrogatives
        )

    def is_adjective(self, word: str) -> bool:
        return clean(word) in self.adjectives

    # -------------------------------------------------------------------------
    # Phrases
    # -------------------------------------------------------------------------

    @staticmethod
    def _current_next(words: Sequence[str], position: int, phrase: Phrase) -> bool:
        if position < 0 or position > len(words) - 2:
            return False
        return (clean(words[position]), clean(words[position + 1])) == phrase

    @staticmethod
    def _previous_current(words: Sequence[str], position: int, phrase: Phrase) -> bool:
        if position < 1 or position > len(words) - 1:
            return False
        return (clean(words[position - 1]), clean(words[position])) == phrase

    @staticmethod
    def _before_previous(words: Sequence[str], position: int, phrase: Phrase) -> bool:
        if position < 2 or position > len(words) - 1:
            return False
        return (clean(words[position - 2]), clean(words[position - 1])) == phrase

    def is_skip_phrase(self, words: Sequence[str], position: int) -> bool:
        """The token at `position` is part of a fixed non-verbal phrase."""
        return (
            any(self._current_next(words, position, p) for p in self.current_next_phrases)
            or any(self._previous_current(words, position, p) for p in self.previous_current_phrases)
            or any(self._before_previous(words, position, p) for p in self.before_previous_phrases)
        )

    def is_sub_sentence_phrase(self, words: Sequence[str], position: int) -> bool:
        """A phrase starting at `position` opens a new clause ("is that")."""
        return any(self._current_next(words, position, p) for p in self.sub_sentence_phrases)
