"""
Clause boundary detection.

Decides whether the token at a position starts a new sub-sentence
(independent clause). Commas, conjunctions, question words and quotes
are candidates; a forward scan to the next verb settles the ambiguous
ones:

    "I like dogs and cats."          -> "and" joins nouns, no boundary
    "I like dogs and I hate cats."   -> "hate" cannot extend "like", boundary
    "He sings and dances."           -> "and" + verb, boundary
"""

from __future__ import annotations

from typing import Sequence

from polarity.grammar.clause import ClauseState
from polarity.grammar.skip import should_skip
from polarity.grammar.tokens import clean, has_comma, is_quote_token, opens_quote
from polarity.lexicon.models import Lexicon


def is_candidate(words: Sequence[str], position: int, lex: Lexicon) -> bool:
    """Token that may separate two clauses."""
    word = words[position]
    return (
        has_comma(word)
        or lex.is_question_word(word)
        or is_quote_token(word)
        or word == "&"
        or lex.is_conjunction(word)
        or lex.is_sub_sentence_phrase(words, position)
    )


def _surely_new(words: Sequence[str], clause: ClauseState, start: int, lex: Lexicon) -> bool:
    word = clean(words[start])
    return (
        lex.is_question_word(word)
        or lex.is_sub_sentence_phrase(words, start)
        or word == "but"
        or clause.first is None
        or has_comma(words[start])
        or (
            lex.is_sentence_conjunction(word)
            and start + 1 < len(words)
            and lex.is_verb(words[start + 1])
        )
    )


def starts_new_clause(
    words: Sequence[str],
    clause: ClauseState,
    start: int,
    lex: Lexicon,
) -> bool:
    """
    True if a new clause begins at `start`.

    Past the surely-new cases, the first verb after the candidate
    decides: one that extends the current chain means no boundary; one
    that does not means a boundary, unless it follows a sentence
    conjunction and shares the tense of the current deepest level
    (a compound predicate). Meeting another candidate first means no
    boundary.
    """
    if start == 0 or not is_candidate(words, start, lex):
        return False

    if _surely_new(words, clause, start, lex):
        return True

    probe = clause.copy()
    for pos in range(start + 1, len(words)):
        word = clean(words[pos])
        if lex.is_verb(word) and not should_skip(words, clause, pos, lex):
            if probe.attach(word, pos, lex):
                return False
            if lex.is_sentence_conjunction(words[pos - 1]) and lex.same_tense(
                words[clause.last_position], word
            ):
                return False
            return True
        if is_candidate(words, pos, lex):
            return False

    return False


def included_in_previous(word: str) -> bool:
    """A comma-terminated token belongs to the clause it closes."""
    return has_comma(word)


def included_in_next(word: str, lex: Lexicon) -> bool:
    """A question word or opening quote belongs to the clause it opens."""
    return lex.is_question_word(word) or opens_quote(word)
