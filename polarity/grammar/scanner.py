"""
Clause scanner — a finite-state loop over the tokens of one sentence.

For each position the scanner raises the ClauseEvents that apply, in
declaration order, and hands each to its handler. A handler answers
with a Step:

    PROCEED  handle the token's remaining events
    NEXT     done with this token
    RETRY    the clause was closed; process the same token again

Event detection is lazy: each event is checked only after the previous
handler has run, against the state that handler left behind.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterator, Sequence

from polarity.core.logging import LogChannel, LogLevel, get_logger
from polarity.errors import InversionError
from polarity.grammar.boundaries import included_in_next, included_in_previous, starts_new_clause
from polarity.grammar.clause import ClauseState, SentenceFlags, open_clause
from polarity.grammar.clearance import verb_after
from polarity.grammar.inversion import invert
from polarity.grammar.skip import firing_rule, should_skip
from polarity.grammar.tokens import clean, join_tokens
from polarity.ir.enums import ClauseEvent
from polarity.lexicon.models import Lexicon

log = get_logger(LogChannel.GRAMMAR)

SUBORDINATORS = ("after", "before")


class Step(str, Enum):
    """What the scanner does after an event handler returns."""

    PROCEED = "proceed"
    NEXT = "next"
    RETRY = "retry"


Handler = Callable[[int, str], Step]


class ClauseScanner:
    """
    Scans one sentence, assembling and inverting its clauses.

    All state lives on the instance: one scanner per sentence, never
    shared between threads.
    """

    def __init__(self, tokens: Sequence[str], lex: Lexicon) -> None:
        self.words: list[str] = list(tokens)
        self.lex = lex
        self.flags = SentenceFlags()
        self.clause: ClauseState = open_clause(self.words, 0, lex, self.flags)
        self.should_invert = True
        self.inversions = 0
        self._handlers: dict[ClauseEvent, Handler] = {
            ClauseEvent.BOUNDARY: self.on_boundary,
            ClauseEvent.VERB: self.on_verb,
            ClauseEvent.INFINITIVE_MARKER: self.on_infinitive_marker,
            ClauseEvent.SUBORDINATOR: self.on_subordinator,
            ClauseEvent.SENTENCE_END: self.on_sentence_end,
        }

    # -------------------------------------------------------------------------
    # Loop
    # -------------------------------------------------------------------------

    def run(self) -> list[str]:
        """Process every position; returns the (mutated) token list."""
        position = 0
        retried_at = -1

        while position < len(self.words):
            step = self.step(position)
            if step is Step.RETRY:
                if retried_at == position:
                    raise InversionError(
                        f"Token {position} ({self.words[position]!r}) re-scanned twice"
                    )
                retried_at = position
                continue
            position += 1

        return self.words

    def step(self, position: int) -> Step:
        """Dispatch the events of one position."""
        events = self.events(position)
        for event, word in events:
            step = self._handlers[event](position, word)
            if step is not Step.PROCEED:
                return step
        return Step.NEXT

    def events(self, position: int) -> Iterator[tuple[ClauseEvent, str]]:
        """
        Events for one position, each checked when the previous one
        has been handled. Yields the event with the token's lookup form
        as it was before any handler touched the sentence.
        """
        words = self.words
        lex = self.lex
        word = clean(words[position])

        if starts_new_clause(words, self.clause, position, lex):
            yield ClauseEvent.BOUNDARY, word
        if lex.is_verb(word):
            yield ClauseEvent.VERB, word
        if (
            word == "to"
            and position + 1 < len(words)
            and lex.is_infinitive(words[position + 1])
        ):
            yield ClauseEvent.INFINITIVE_MARKER, word
        if word in SUBORDINATORS and verb_after(words, position, lex):
            yield ClauseEvent.SUBORDINATOR, word
        if position == len(words) - 1:
            yield ClauseEvent.SENTENCE_END, word

    # -------------------------------------------------------------------------
    # Clause bookkeeping
    # -------------------------------------------------------------------------

    def _invert(self) -> bool:
        changed = invert(self.words, self.clause, self.lex)
        if changed:
            self.inversions += 1
        return changed

    def _reopen(self, start: int) -> None:
        self.clause = open_clause(self.words, start, self.lex, self.flags)

    def _after(self, position: int) -> int:
        return position + 1 if position + 1 < len(self.words) else position

    def _ignore(self, position: int) -> Step:
        # An ignored last token still closes the pending clause
        if self.should_invert and position == len(self.words) - 1:
            self._invert()
        return Step.NEXT

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    def on_boundary(self, position: int, word: str) -> Step:
        token = self.words[position]

        if included_in_previous(token):
            # "..., " closes the clause and may be its last verb
            if self.should_invert:
                if self.lex.is_verb(word) and not should_skip(
                    self.words, self.clause, position, self.lex
                ):
                    self.clause.attach(word, position, self.lex)
                self._invert()
            self._reopen(self._after(position))
            self.should_invert = True
            return Step.NEXT

        if included_in_next(token, self.lex):
            if self.should_invert:
                self._invert()
            self._reopen(position)
            self.should_invert = True
            return Step.PROCEED

        if self.should_invert:
            self._invert()
        self._reopen(self._after(position))
        self.should_invert = True
        return Step.NEXT

    def on_verb(self, position: int, word: str) -> Step:
        words = self.words
        lex = self.lex
        clause = self.clause

        if should_skip(words, clause, position, lex):
            if log.is_enabled(LogLevel.DEBUG):
                log.debug(
                    "verb_skipped",
                    position=position,
                    word=word,
                    rule=firing_rule(words, clause, position, lex),
                )
            return self._ignore(position)

        last = clause.last_position
        if last > -1 and any(lex.is_possession(w) for w in words[last + 1:position]):
            return self._ignore(position)

        if lex.is_clause_opener(word):
            self.should_invert = True

        if clause.attach(word, position, lex):
            return Step.PROCEED

        if lex.is_gerund(word) or (clause.first is None and lex.is_past_participle(word)):
            return self._ignore(position)

        if not self.should_invert:
            return Step.PROCEED

        # The chain cannot grow: close it and start over from the clause start
        if self._invert():
            self.should_invert = False
        self._reopen(clause.sub_start)
        return Step.RETRY

    def on_infinitive_marker(self, position: int, word: str) -> Step:
        self.clause.expect_infinitive()
        return Step.PROCEED

    def on_subordinator(self, position: int, word: str) -> Step:
        # Subordinate clauses keep their polarity
        if self.should_invert:
            self._invert()
        self._reopen(position)
        self.should_invert = False
        return Step.PROCEED

    def on_sentence_end(self, position: int, word: str) -> Step:
        if self.should_invert:
            self._invert()
        return Step.NEXT


def invert_sentence(tokens: Sequence[str], lex: Lexicon) -> list[str]:
    """Invert every clause of one sentence; deleted tokens come back as ""."""
    return ClauseScanner(tokens, lex).run()


def negate_sentence(sentence: str, lex: Lexicon) -> str:
    """Invert one sentence given as text."""
    return join_tokens(invert_sentence(sentence.split(), lex))
