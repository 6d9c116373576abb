"""
Errors — Exception hierarchy for the negation engine.

Nothing here escapes `negate()`; these exist so the layers below it
can fail loudly and the pipeline can decide what to do about it.
"""


class PolarityError(Exception):
    """Base class for all polarity errors."""


class LexiconError(PolarityError):
    """A lexicon data file is missing or malformed."""


class InversionError(PolarityError):
    """The clause scanner reached a state it cannot make progress from."""
