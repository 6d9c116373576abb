"""
Clause state machine.

A clause is assembled left to right, one verb-chain level at a time:

    "He  has  been  sleeping."
          L1   L2    L3

Each level holds the cleaned word, its position in the sentence and
every VerbForm the word can carry. Level n+1 can only attach once level
n exists, and only if TRANSITIONS allows it. The chain is capped at
MAX_LEVELS.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from polarity.grammar.tokens import clean
from polarity.ir.enums import FINITE_FORMS, PolarityShift, VerbForm
from polarity.lexicon.models import Lexicon

MAX_LEVELS = 4


@dataclass(frozen=True)
class Level:
    """One link in the verb chain."""

    word: str
    position: int
    forms: frozenset[VerbForm]

    def has(self, form: VerbForm) -> bool:
        return form in self.forms


@dataclass
class SentenceFlags:
    """
    State shared by every clause of one sentence.

    `changed` records that some clause of the sentence already had a
    polarity transform applied. The false-positive filter reads it when
    a verb follows a conjunction.
    """

    changed: bool = False


# A transition rule: may `forms` (of the candidate) follow `previous`?
Rule = Callable[[frozenset[VerbForm], Level, "ClauseState", Lexicon], bool]


def _level2(forms: frozenset[VerbForm], prev: Level, clause: "ClauseState", lex: Lexicon) -> bool:
    infinitive_ok = (
        prev.has(VerbForm.DO) or prev.has(VerbForm.MODAL) or clause.expects_infinitive
    )
    gerund_ok = prev.has(VerbForm.BE) or lex.is_start_or_stop(prev.word)
    participle_ok = prev.has(VerbForm.BE) or prev.has(VerbForm.HAVE)
    return (
        (VerbForm.INFINITIVE in forms and infinitive_ok)
        or (VerbForm.GERUND in forms and gerund_ok)
        or (VerbForm.PARTICIPLE in forms and participle_ok)
    )


def _level3(forms: frozenset[VerbForm], prev: Level, clause: "ClauseState", lex: Lexicon) -> bool:
    return (
        (
            VerbForm.INFINITIVE in forms
            and (prev.word == "going" or lex.infinitive_of(prev.word) == "allow")
        )
        or (
            VerbForm.GERUND in forms
            and (prev.word in ("be", "stop") or lex.is_start_or_stop(prev.word))
        )
        or (VerbForm.PARTICIPLE in forms and prev.word in ("have", "been", "be"))
    )


def _level4(forms: frozenset[VerbForm], prev: Level, clause: "ClauseState", lex: Lexicon) -> bool:
    return (
        (
            VerbForm.GERUND in forms
            and (prev.word == "been" or lex.is_start_or_stop(prev.word))
        )
        or (VerbForm.PARTICIPLE in forms and prev.word == "been")
    )


#: Attachment rule per level, keyed by the level being attached (2..4).
#: Level 1 accepts any finite form.
TRANSITIONS: dict[int, Rule] = {
    2: _level2,
    3: _level3,
    4: _level4,
}


@dataclass
class ClauseState:
    """The verb chain of the clause being assembled."""

    sub_start: int
    flags: SentenceFlags
    is_question: bool = False
    levels: list[Level] = field(default_factory=list)
    expects_infinitive: bool = False
    shift: Optional[PolarityShift] = None

    # -------------------------------------------------------------------------
    # Attachment
    # -------------------------------------------------------------------------

    def attach(self, word: str, position: int, lex: Lexicon) -> bool:
        """
        Try to add `word` as the next level of the chain.

        Returns:
            True if the word was attached
        """
        if len(self.levels) >= MAX_LEVELS:
            return False

        cleaned = clean(word)
        forms = lex.classify(cleaned)

        if not self.levels:
            allowed = bool(forms & FINITE_FORMS)
        else:
            rule = TRANSITIONS[len(self.levels) + 1]
            allowed = rule(forms, self.levels[-1], self, lex)

        if allowed:
            self.levels.append(Level(cleaned, position, forms))
        return allowed

    def undo(self) -> None:
        """Remove the highest populated level."""
        if self.levels:
            self.levels.pop()

    def copy(self) -> "ClauseState":
        """Independent snapshot for lookahead; the sentence flags stay shared."""
        return ClauseState(
            sub_start=self.sub_start,
            flags=self.flags,
            is_question=self.is_question,
            levels=list(self.levels),
            expects_infinitive=self.expects_infinitive,
            shift=self.shift,
        )

    def expect_infinitive(self) -> None:
        """A "to" + infinitive was seen: level 2 may now be an infinitive."""
        self.expects_infinitive = True

    # -------------------------------------------------------------------------
    # Polarity
    # -------------------------------------------------------------------------

    def mark(self, shift: PolarityShift) -> None:
        self.shift = shift

    @property
    def to_positive(self) -> bool:
        return self.shift is PolarityShift.TO_POSITIVE

    @property
    def to_negative(self) -> bool:
        return self.shift is PolarityShift.TO_NEGATIVE

    # -------------------------------------------------------------------------
    # Level access
    # -------------------------------------------------------------------------

    def level(self, n: int) -> Optional[Level]:
        """Level n (1-based), or None."""
        if 1 <= n <= len(self.levels):
            return self.levels[n - 1]
        return None

    @property
    def first(self) -> Optional[Level]:
        return self.level(1)

    @property
    def second(self) -> Optional[Level]:
        return self.level(2)

    @property
    def last(self) -> Optional[Level]:
        return self.levels[-1] if self.levels else None

    @property
    def last_position(self) -> int:
        """Position of the deepest level, -1 when empty."""
        return self.levels[-1].position if self.levels else -1

    @property
    def before_last_position(self) -> int:
        """Position of the level before the deepest one, -1 if there is none."""
        return self.levels[-2].position if len(self.levels) > 1 else -1


def open_clause(
    words: list[str],
    start: int,
    lex: Lexicon,
    flags: SentenceFlags,
) -> ClauseState:
    """
    Start a clause at `start`.

    The clause is a question when it opens with a question word, or when
    the sentence opens with a do-form or modal ("Do you ...", "Can we
    ..."), provided something follows the opening word.
    """
    first = words[start] if 0 <= start < len(words) else ""
    is_question = (
        lex.is_question_word(first)
        or (start == 0 and (lex.is_form_of_do(first) or lex.is_modal(first)))
    ) and start + 1 < len(words)
    return ClauseState(sub_start=start, flags=flags, is_question=is_question)
