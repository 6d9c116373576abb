"""
Clean-ups run after a clause has been inverted.

- adverbs that only make sense with the old polarity ("already",
  "always", "just", "now") are deleted next to the inverted verb;
- "not ... but" and "some"/"any" follow the new polarity.
"""

from __future__ import annotations

from typing import Sequence

from polarity.grammar.clause import ClauseState
from polarity.grammar.tokens import DELETED, clean, restyle
from polarity.lexicon.models import Lexicon


def _delete_adjacent(words: list[str], position: int, target: str) -> None:
    if position > 0 and clean(words[position - 1]) == target:
        words[position - 1] = DELETED
    elif position < len(words) - 1 and clean(words[position + 1]) == target:
        words[position + 1] = DELETED


def clear_after(words: list[str], position: int, lex: Lexicon) -> None:
    """Delete clean-up adverbs on either side of `position`."""
    for target in lex.clean_up_words:
        _delete_adjacent(words, position, target)


def verb_after(words: Sequence[str], position: int, lex: Lexicon) -> bool:
    """Any verb later in the sentence."""
    return any(lex.is_verb(w) for w in words[position + 1:])


def check_not_but(words: list[str], clause: ClauseState, lex: Lexicon) -> None:
    """
    "He is not a man but a child." flips to "He is a man not a child."
    (and back). Only looks past the verb chain, up to the next verb.
    """
    start = clause.last_position
    if start < 0:
        return
    for position in range(start + 1, len(words)):
        word = clean(words[position])
        if lex.is_verb(word):
            break
        if clause.to_negative and word == "not" and not verb_after(words, position, lex):
            words[position] = restyle(words[position], "but")
            break
        if clause.to_positive and word == "but" and not verb_after(words, position, lex):
            words[position] = restyle(words[position], "not")
            break


def check_some_any(words: list[str], clause: ClauseState, lex: Lexicon) -> None:
    """First "some" after the verb becomes "any" when negating, and back."""
    first = clause.first
    if first is None:
        return
    for position in range(first.position + 1, len(words)):
        word = clean(words[position])
        if clause.to_negative and word == "some":
            words[position] = restyle(words[position], "any")
            break
        if clause.to_positive and word == "any":
            words[position] = restyle(words[position], "some")
            break
