"""
Inversion transform.

Flips the polarity of one assembled clause in place. `words` is the
sentence's token list; replaced tokens are restyled after the token
they replace and deleted tokens become "" so positions stay valid.

Strategy, in order:
    1. no-op for empty chains, reported clauses and skip questions
    2. push questions: negate the main verb, not the auxiliary
    3. pronoun and start/stop swaps ("Everybody" -> "Nobody")
    4. table lookup for modal/be/have, do-support for lexical verbs
    5. clean-ups (stray adverbs, "not"/"but", "some"/"any")
"""

from __future__ import annotations

from typing import Optional

from polarity.core.logging import LogChannel, LogLevel, get_logger
from polarity.grammar.chars import is_special
from polarity.grammar.clause import ClauseState
from polarity.grammar.clearance import check_not_but, check_some_any, clear_after, verb_after
from polarity.grammar.questions import is_push_question, is_skip_question
from polarity.grammar.tokens import DELETED, clean, is_adverb, restyle
from polarity.ir.enums import PolarityShift
from polarity.lexicon.models import Lexicon

log = get_logger(LogChannel.INVERSION)

# Participle + "to"-infinitive chains that still take do-support
_PARTICIPLE_CONTROL_VERBS = frozenset({"had", "voted", "allowed", "wanted", "tried"})

_HAVE_FORMS = ("have", "had", "has")


# =============================================================================
# Negation words
# =============================================================================

def next_word_negation(words: list[str], position: int) -> bool:
    """True if "not", "never" or a standalone "no" follows `position`."""
    n = len(words)
    if position >= n - 1:
        return False
    nxt = clean(words[position + 1])
    if nxt in ("not", "never"):
        return True
    if nxt == "no":
        # "no one" is a pronoun, not a negation
        return position == n - 2 or clean(words[position + 2]) != "one"
    return False


def word_after_next_negation(words: list[str], position: int) -> bool:
    """True if "not", "no" or "never" sits two tokens after `position`."""
    if position >= len(words) - 2:
        return False
    return clean(words[position + 2]) in ("not", "no", "never")


def negation_after(words: list[str], position: int) -> bool:
    """Delete the negation following `position`; True if one was found."""
    if next_word_negation(words, position):
        words[position + 1] = restyle(words[position + 1], DELETED)
        return True
    if word_after_next_negation(words, position):
        words[position + 2] = restyle(words[position + 2], DELETED)
        return True
    return False


def _trailing_specials(word: str) -> str:
    tail = ""
    for ch in reversed(word[-2:]):
        if not is_special(ch):
            break
        tail = ch + tail
    return tail


# =============================================================================
# Entry point
# =============================================================================

def invert(words: list[str], clause: ClauseState, lex: Lexicon) -> bool:
    """
    Invert one clause.

    Returns:
        False if the clause was legitimately left alone
    """
    first = clause.first
    if first is None:
        return False

    last = clause.last_position
    if lex.is_clause_opener(words[last]) and verb_after(words, last, lex):
        return False

    if is_skip_question(words, clause, lex):
        log.debug("skip_question", position=clause.sub_start)
        return False

    if is_push_question(words, clause, lex):
        invert_push_question(words, clause, lex)
    elif not general_case(words, clause, lex):
        perform_inversion(words, clause, lex)

    clear_after(words, first.position, lex)
    check_not_but(words, clause, lex)
    check_some_any(words, clause, lex)

    if log.is_enabled(LogLevel.DEBUG):
        log.debug(
            "clause_inverted",
            sub_start=clause.sub_start,
            chain=[lvl.word for lvl in clause.levels],
            shift=clause.shift.value if clause.shift else None,
        )
    return True


def invert_push_question(words: list[str], clause: ClauseState, lex: Lexicon) -> None:
    """Negation goes onto the main verb ("What do you not like?")."""
    first = clause.first
    removed = False

    if lex.is_positive_auxiliary(first.word):
        removed = negation_after(words, first.position)
        if removed:
            clause.mark(PolarityShift.TO_POSITIVE)
            clause.flags.changed = True

    if removed:
        return

    if lex.is_negative_auxiliary(first.word):
        words[first.position] = restyle(
            words[first.position], lex.opposite_auxiliary(first.word)
        )
        clause.mark(PolarityShift.TO_POSITIVE)
        clause.flags.changed = True
    elif clause.second is not None:
        position = clause.last_position
        words[position] = "not " + words[position]
        clause.mark(PolarityShift.TO_NEGATIVE)
        clause.flags.changed = True


# =============================================================================
# Pronoun and start/stop swaps
# =============================================================================

def general_case(words: list[str], clause: ClauseState, lex: Lexicon) -> bool:
    """Swaps that replace the verb inversion entirely when they fire."""
    return (
        every_to_no(words, clause, lex)
        or no_to_some(words, clause, lex)
        or start_to_stop(words, clause, lex)
    )


def every_to_no(words: list[str], clause: ClauseState, lex: Lexicon) -> bool:
    """Subject every- pronoun flips: "Everybody" -> "Nobody"."""
    position = clause.first.position - 1
    if position < 0 or not lex.is_indefinite_pronoun(words[position]):
        return False
    words[position] = restyle(words[position], lex.opposite_indefinite(words[position]))
    clause.mark(PolarityShift.TO_NEGATIVE)
    return True


def no_to_some(words: list[str], clause: ClauseState, lex: Lexicon) -> bool:
    """No- pronoun in the clause: "Nobody" -> "Somebody", "No one" -> "Someone"."""
    n = len(words)
    last = clause.last_position
    if last + 2 < n:
        end = last + 2
    elif last + 1 < n:
        end = last + 1
    else:
        end = last

    for position in range(clause.sub_start, end):
        word = clean(words[position])
        if lex.is_negative_indefinite(word):
            words[position] = restyle(
                words[position], lex.opposite_negative_indefinite(word)
            )
            clause.mark(PolarityShift.TO_POSITIVE)
            return True
        if word == "no" and position + 1 < n and clean(words[position + 1]) == "one":
            words[position] = restyle(words[position], "someone")
            words[position + 1] = restyle(words[position + 1], DELETED)
            clause.mark(PolarityShift.TO_POSITIVE)
            return True
    return False


def start_to_stop(words: list[str], clause: ClauseState, lex: Lexicon) -> bool:
    """Start/stop verb before the deepest level: "started running" -> "stopped running"."""
    position = clause.before_last_position
    if position < 0 or not lex.is_start_or_stop(words[position]):
        return False
    words[position] = restyle(words[position], lex.opposite_start_stop(words[position]))
    return True


# =============================================================================
# Verb inversion
# =============================================================================

def should_negate_have(words: list[str], clause: ClauseState, lex: Lexicon) -> bool:
    """
    "have" used as a main verb takes do-support:
    "He has a car." -> "He doesn't have a car."
    """
    first = clause.first
    second = clause.second
    if first is None or first.word not in _HAVE_FORMS:
        return False
    last_token = words[-1]
    if first.position == 0 and last_token.endswith("?"):
        return False
    if second is not None and not lex.is_infinitive(second.word):
        return False
    return not next_word_negation(words, first.position)


def perform_inversion(words: list[str], clause: ClauseState, lex: Lexicon) -> None:
    """Invert the first level: table lookup or do-support."""
    first = clause.first
    verb_phrase = lex.two_part_verb(words, clause.last_position)

    if (
        lex.is_modal(first.word) or lex.is_form_of_be(first.word) or lex.is_form_of_have(first.word)
    ) and not should_negate_have(words, clause, lex):
        simple_inversion(words, clause, lex)
        clause.flags.changed = True
    elif lex.is_verb(first.word):
        complex_inversion(words, clause, verb_phrase, lex)


def simple_inversion(words: list[str], clause: ClauseState, lex: Lexicon) -> None:
    """Modal, be and have: swap for the opposite form."""
    first = clause.first
    position = first.position

    if lex.is_positive_auxiliary(first.word):
        if negation_after(words, position):
            clause.mark(PolarityShift.TO_POSITIVE)
        else:
            words[position] = restyle(words[position], lex.opposite_auxiliary(first.word))
            clause.mark(PolarityShift.TO_NEGATIVE)
    else:
        words[position] = restyle(words[position], lex.opposite_auxiliary(first.word))
        clause.mark(PolarityShift.TO_POSITIVE)


def complex_inversion(
    words: list[str],
    clause: ClauseState,
    verb_phrase: Optional[str],
    lex: Lexicon,
) -> None:
    """Lexical verbs: insert or remove do-support."""
    first = clause.first
    word = first.word
    position = first.position
    clause.flags.changed = True

    special = do_did_special_case(words, clause)

    if lex.is_positive_do(word) and negation_after(words, position):
        clause.mark(PolarityShift.TO_POSITIVE)
    elif special is not None:
        words[position] = restyle(words[position], special)
        clause.mark(PolarityShift.TO_NEGATIVE)
    elif lex.is_infinitive(word):
        negate_infinitive(words, clause, verb_phrase, lex)
        clause.mark(PolarityShift.TO_NEGATIVE)
    elif lex.is_third_person(word):
        negate(words, clause, verb_phrase, "doesn't", lex)
        clause.mark(PolarityShift.TO_NEGATIVE)
    elif lex.is_perfect(word):
        negate_past(words, clause, verb_phrase, lex)
        clause.mark(PolarityShift.TO_NEGATIVE)
    elif lex.is_negative_do(word):
        turn_do_positive(words, clause, verb_phrase, lex)
        clause.mark(PolarityShift.TO_POSITIVE)
    else:
        clause.flags.changed = False


def do_did_special_case(words: list[str], clause: ClauseState) -> Optional[str]:
    """Bare sentence-final "do"/"did" ("I did." -> "I didn't.")."""
    first = clause.first
    if clause.second is not None or clause.is_question:
        return None
    if first.position != len(words) - 1:
        return None
    return {"do": "don't", "did": "didn't"}.get(first.word)


def negate(
    words: list[str],
    clause: ClauseState,
    verb_phrase: Optional[str],
    neg_do: str,
    lex: Lexicon,
) -> None:
    """Put `neg_do` in front of the first level's infinitive."""
    first = clause.first
    position = first.position
    infinitive = lex.infinitive_of(first.word) or first.word

    if position > 0 and is_adverb(words[position - 1]):
        # "She really likes it." -> "She doesn't really like it."
        words[position] = restyle(
            words[position], f"{neg_do} {words[position - 1]} {infinitive}"
        )
        words[position - 1] = DELETED
    elif clause.is_question and lex.is_positive_do(first.word) and position != len(words) - 1:
        words[position] = restyle(words[position], neg_do)
    elif verb_phrase is not None:
        # The noun half moves behind the auxiliary: "don't trash talk"
        words[position] = restyle(words[position], f"{neg_do} {verb_phrase} {infinitive}")
        words[clause.last_position - 1] = DELETED
    else:
        words[position] = restyle(words[position], f"{neg_do} {infinitive}")


def negate_infinitive(
    words: list[str],
    clause: ClauseState,
    verb_phrase: Optional[str],
    lex: Lexicon,
) -> None:
    first = clause.first
    position = first.position

    if clause.second is None and position > 1 and clean(words[position - 1]) == "to":
        words[position - 1] = restyle(words[position - 1], "to not")
    elif (
        position > 0
        and (
            lex.is_singular_noun(words[position - 1])
            or lex.is_name(words[position - 1])
            or lex.is_singular_pronoun(words[position - 1])
        )
        and lex.is_perfect(first.word)
    ):
        # "He put it there." reads as past tense
        negate_past(words, clause, verb_phrase, lex)
    else:
        negate(words, clause, verb_phrase, "don't", lex)


def _participle_then_infinitive(clause: ClauseState, lex: Lexicon) -> bool:
    first = clause.first
    second = clause.second
    return (
        first is not None
        and second is not None
        and lex.is_past_participle(first.word)
        and lex.is_infinitive(second.word)
        and first.word not in _PARTICIPLE_CONTROL_VERBS
    )


def negate_past(
    words: list[str],
    clause: ClauseState,
    verb_phrase: Optional[str],
    lex: Lexicon,
) -> None:
    first = clause.first
    second = clause.second

    if _participle_then_infinitive(clause, lex):
        return

    if first.word == "did" and second is not None and lex.is_infinitive(second.word):
        words[first.position] = restyle(words[first.position], "didn't")
        return

    negate(words, clause, verb_phrase, "didn't", lex)


def turn_do_positive(
    words: list[str],
    clause: ClauseState,
    verb_phrase: Optional[str],
    lex: Lexicon,
) -> None:
    """Drop do-support ("She doesn't sleep." -> "She sleeps.")."""
    first = clause.first
    position = first.position
    second = clause.second

    if first.word == "doesn't":
        main = lex.third_person_of(second.word) if second else None
        turn_to_positive(words, clause, verb_phrase, "does", main)
    elif first.word == "don't":
        if second is None or clause.is_question:
            words[position] = restyle(words[position], "do")
        else:
            words[position] = DELETED
    elif first.word == "didn't":
        main = lex.perfect_of(second.word) if second else None
        turn_to_positive(words, clause, verb_phrase, "did", main)


def turn_to_positive(
    words: list[str],
    clause: ClauseState,
    verb_phrase: Optional[str],
    does_or_did: str,
    main_verb: Optional[str],
) -> None:
    """Fold the auxiliary and the main verb into one inflected verb."""
    first = clause.first
    second = clause.second
    position = first.position

    if clause.is_question or second is None or main_verb is None:
        words[position] = restyle(words[position], does_or_did)
        return

    # Casing from the auxiliary, trailing punctuation from the dropped verb
    style = words[position] + _trailing_specials(words[second.position])

    if verb_phrase is not None:
        words[position] = restyle(style, f"{verb_phrase} {main_verb}")
        words[second.position] = DELETED
        words[second.position - 1] = DELETED
    else:
        words[position] = restyle(style, main_verb)
        words[second.position] = DELETED
