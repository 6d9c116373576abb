"""
Question classification.

Skip questions are left alone ("When will it end?", "Will you come?").
Push questions move the negation onto the main verb ("What do you
like?" -> "What do you not like?").
"""

from __future__ import annotations

from typing import Sequence

from polarity.grammar.clause import ClauseState
from polarity.lexicon.models import Lexicon


def _future_question(words: Sequence[str], clause: ClauseState, lex: Lexicon) -> bool:
    first = clause.first
    if first is None or first.word != "will":
        return False
    return clause.is_question or (
        first.position > 0 and lex.is_question_word(words[first.position - 1])
    )


def _opening_word(words: Sequence[str], clause: ClauseState) -> str:
    if 0 <= clause.sub_start < len(words):
        return words[clause.sub_start]
    return ""


def is_skip_question(words: Sequence[str], clause: ClauseState, lex: Lexicon) -> bool:
    return _future_question(words, clause, lex) or lex.is_skip_question_word(
        _opening_word(words, clause)
    )


def is_push_question(words: Sequence[str], clause: ClauseState, lex: Lexicon) -> bool:
    return lex.is_push_question_word(_opening_word(words, clause))
