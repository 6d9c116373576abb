"""
False-positive filter.

Many English words look like verbs without acting as one in context:
"the *post*", "John's *dog*", "last *night*", "according *to*". Before
a verb-looking token is attached to the clause, every rule below gets a
chance to veto it. Any single rule firing is enough.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from polarity.grammar.clause import ClauseState
from polarity.grammar.tokens import clean
from polarity.lexicon.models import Lexicon

SkipRule = Callable[[Sequence[str], ClauseState, int, Lexicon], bool]


def participle_after_gerund(words: Sequence[str], clause: ClauseState, pos: int, lex: Lexicon) -> bool:
    """A participle right after a gerund ("being *hurt*")."""
    return pos > 0 and lex.is_gerund(words[pos - 1]) and lex.is_past_participle(words[pos])


def article_before(words: Sequence[str], clause: ClauseState, pos: int, lex: Lexicon) -> bool:
    """Article right before, or two back with a name between ("the Smith *report*")."""
    return pos > clause.sub_start and (
        lex.is_article(words[pos - 1])
        or (pos > 1 and lex.is_article(words[pos - 2]) and lex.is_name(words[pos - 1]))
    )


def _multiplicity_error(words: Sequence[str], pos: int, lex: Lexicon) -> bool:
    # Singular subject + bare infinitive, or plural subject + third person
    prev = words[pos - 1]
    return (
        lex.is_infinitive(words[pos])
        and not lex.is_perfect(words[pos])
        and (lex.is_name(prev) or lex.is_singular_noun(prev) or lex.is_singular_pronoun(prev))
    ) or (
        lex.is_third_person(words[pos])
        and (lex.is_plural_noun(prev) or lex.is_plural_pronoun(prev))
    )


def _nouns_joined_with_and(words: Sequence[str], pos: int, lex: Lexicon) -> bool:
    # "John and Mary *like* it": plural subject made of two singulars
    def nominal(word: str) -> bool:
        return lex.is_name(word) or lex.is_noun(word) or lex.is_basic_pronoun(word)

    return (
        pos > 2
        and lex.is_infinitive(words[pos])
        and nominal(words[pos - 1])
        and words[pos - 2] in ("and", "&")
        and nominal(words[pos - 3])
    )


def _that_verb(words: Sequence[str], pos: int, lex: Lexicon) -> bool:
    return pos + 2 < len(words) and words[pos + 1] == "that" and lex.is_verb(words[pos + 2])


def false_positive(words: Sequence[str], clause: ClauseState, pos: int, lex: Lexicon) -> bool:
    """
    The clause has no verb yet and the token cannot be its verb:
    subject/verb number disagreement, "X that <verb>" or a possessive
    name right before it.
    """
    if clause.first is not None or pos <= clause.sub_start:
        return False
    return (
        (
            _multiplicity_error(words, pos, lex)
            and lex.two_part_verb(words, pos) is None
            and not _nouns_joined_with_and(words, pos, lex)
        )
        or _that_verb(words, pos, lex)
        or lex.is_possession(words[pos - 1])
    )


def conjunction_before(words: Sequence[str], clause: ClauseState, pos: int, lex: Lexicon) -> bool:
    """
    A verb after a conjunction is skipped while the clause is still
    unresolved, or when it could not replace the current deepest level.
    """
    if pos < clause.sub_start or pos == 0:
        return False
    if not lex.is_conjunction(words[pos - 1]):
        return False
    if clause.first is None and not clause.flags.changed:
        return True
    probe = clause.copy()
    probe.undo()
    return not probe.attach(words[pos], pos, lex)


def adjective_before(words: Sequence[str], clause: ClauseState, pos: int, lex: Lexicon) -> bool:
    return pos > clause.sub_start and lex.is_adjective(words[pos - 1])


def first_place_error(words: Sequence[str], clause: ClauseState, pos: int, lex: Lexicon) -> bool:
    """
    Sentence-initial verb that is not an auxiliary or a bare infinitive,
    or an infinitive directly followed by another verb.
    """
    if pos != 0:
        return False
    word = words[pos]
    if not (
        lex.is_modal(word)
        or lex.is_form_of_do(word)
        or lex.is_infinitive(word)
        or lex.is_form_of_be(word)
        or lex.is_form_of_have(word)
    ):
        return True
    return lex.is_infinitive(word) and len(words) > 1 and lex.is_verb(words[1])


def of_after(words: Sequence[str], clause: ClauseState, pos: int, lex: Lexicon) -> bool:
    """Followed by "of" ("the *end* of")."""
    return pos <= len(words) - 2 and clean(words[pos + 1]) == "of"


def skip_phrase(words: Sequence[str], clause: ClauseState, pos: int, lex: Lexicon) -> bool:
    return lex.is_skip_phrase(words, pos)


def pronoun_before(words: Sequence[str], clause: ClauseState, pos: int, lex: Lexicon) -> bool:
    """Object or possessive pronoun right before ("my *work*")."""
    return pos > clause.sub_start and (
        lex.is_object_pronoun(words[pos - 1]) or lex.is_possessive_pronoun(words[pos - 1])
    )


def preposition_before(words: Sequence[str], clause: ClauseState, pos: int, lex: Lexicon) -> bool:
    if pos < clause.sub_start or pos == 0:
        return False
    return lex.is_preposition(words[pos - 1])


def participle_with_by(words: Sequence[str], clause: ClauseState, pos: int, lex: Lexicon) -> bool:
    """Passive use: "*supported* by", "*loved* all by"."""
    if not lex.is_past_participle(words[pos]):
        return False
    return (pos + 1 < len(words) and clean(words[pos + 1]) == "by") or (
        pos + 2 < len(words) and clean(words[pos + 2]) == "by"
    )


def gerund_before(words: Sequence[str], clause: ClauseState, pos: int, lex: Lexicon) -> bool:
    return pos > 0 and lex.is_gerund(words[pos - 1])


def adjacent_names(words: Sequence[str], clause: ClauseState, pos: int, lex: Lexicon) -> bool:
    """A name next to another name is part of a proper noun."""
    if not lex.is_name(words[pos]):
        return False
    return (pos > 0 and lex.is_name(words[pos - 1])) or (
        pos + 1 < len(words) and lex.is_name(words[pos + 1])
    )


#: Rules in evaluation order.
SKIP_RULES: tuple[SkipRule, ...] = (
    participle_after_gerund,
    article_before,
    false_positive,
    conjunction_before,
    adjective_before,
    first_place_error,
    of_after,
    skip_phrase,
    pronoun_before,
    preposition_before,
    participle_with_by,
    gerund_before,
    adjacent_names,
)


def should_skip(words: Sequence[str], clause: ClauseState, position: int, lex: Lexicon) -> bool:
    """True if the verb-looking token at `position` is not a verb here."""
    return any(rule(words, clause, position, lex) for rule in SKIP_RULES)


def firing_rule(words: Sequence[str], clause: ClauseState, position: int, lex: Lexicon) -> Optional[str]:
    """Name of the first rule that vetoes `position` (for debug logging)."""
    for rule in SKIP_RULES:
        if rule(words, clause, position, lex):
            return rule.__name__
    return None
