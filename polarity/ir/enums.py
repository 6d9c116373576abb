"""
IR Enums — All grammatical labels, scanner events, and status codes.

No stringly-typed constants scattered across the grammar modules.
"""

from enum import Enum


# ============================================================================
# Verb Phrase Structure
# ============================================================================

class VerbForm(str, Enum):
    """
    Grammatical form a word can take inside a clause's verb chain.

    A single word may carry several forms at once ("put" is an
    infinitive, a perfect and a past participle; "does" is a do-form
    and a third-person form). Attachment legality is decided on the
    full set, see grammar.clause.TRANSITIONS.
    """

    MODAL = "modal"                # will, can't, should
    DO = "do"                      # do, did, doesn't, done
    BE = "be"                      # am, is, wasn't, be
    HAVE = "have"                  # have, hasn't, had
    INFINITIVE = "infinitive"      # go, sleep, be
    GERUND = "gerund"              # going, sleeping, being
    PARTICIPLE = "participle"      # gone, slept, been
    THIRD_PERSON = "third_person"  # goes, sleeps, is
    PERFECT = "perfect"            # went, slept, was


#: Forms that may open a verb chain (level 1).
FINITE_FORMS = frozenset({
    VerbForm.MODAL,
    VerbForm.DO,
    VerbForm.BE,
    VerbForm.HAVE,
    VerbForm.INFINITIVE,
    VerbForm.THIRD_PERSON,
    VerbForm.PERFECT,
})

#: Forms compared when deciding whether two verbs share a tense.
TENSE_FORMS = (
    VerbForm.INFINITIVE,
    VerbForm.PERFECT,
    VerbForm.PARTICIPLE,
    VerbForm.THIRD_PERSON,
    VerbForm.GERUND,
)


class PolarityShift(str, Enum):
    """Net polarity effect of the transform applied to a clause."""

    TO_POSITIVE = "to_positive"
    TO_NEGATIVE = "to_negative"


# ============================================================================
# Clause Scanner
# ============================================================================

class ClauseEvent(str, Enum):
    """
    Events raised by the clause scanner for a single token.

    Events are raised in declaration order; a handler may stop the
    remaining events for the token (see grammar.scanner.Step).
    """

    BOUNDARY = "boundary"                    # a new clause starts here
    VERB = "verb"                            # the token looks like a verb
    INFINITIVE_MARKER = "infinitive_marker"  # "to" + infinitive
    SUBORDINATOR = "subordinator"            # "after"/"before" + verb
    SENTENCE_END = "sentence_end"            # last token of the sentence


# ============================================================================
# Diagnostics & Status
# ============================================================================

class SentenceStatus(str, Enum):
    """Outcome of inverting one sentence."""

    INVERTED = "inverted"      # at least one token changed
    UNCHANGED = "unchanged"    # legitimately left alone (e.g. skip question)
    FAILED = "failed"          # structural fault, emitted unchanged


class DiagnosticLevel(str, Enum):
    """Diagnostic severity levels."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class TransformStatus(str, Enum):
    """Overall transformation status."""

    SUCCESS = "success"
    PARTIAL = "partial"
    ERROR = "error"
