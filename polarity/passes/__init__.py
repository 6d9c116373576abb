"""Passes — Pipeline stages for polarity inversion."""

from polarity.passes.p00_normalize import normalize
from polarity.passes.p10_expand_contractions import expand_contractions
from polarity.passes.p20_split_sentences import split_sentences
from polarity.passes.p30_invert import invert
from polarity.passes.p40_reassemble import reassemble

__all__ = [
    "normalize",
    "expand_contractions",
    "split_sentences",
    "invert",
    "reassemble",
]
