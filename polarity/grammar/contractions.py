"""
Contraction expansion.

Pronoun contractions are spelled out before scanning so that the
auxiliary gets its own token position:

    "I'm happy."       -> "I am happy."
    "She's gone."      -> "She has gone."    (participle follows)
    "She's nice."      -> "She is nice."
    "They'd left."     -> "They had left."
    "They'd like it."  -> "They would like it."

Negative contractions ("don't") and possessives ("John's") are left
as they are.
"""

from __future__ import annotations

from typing import Optional, Sequence

from polarity.grammar.tokens import clean, join_tokens
from polarity.lexicon.models import Lexicon

_SUFFIXES = {
    "'m": "am",
    "'ll": "will",
    "'re": "are",
    "'ve": "have",
}

# Suffix -> (with past participle ahead, otherwise)
_AMBIGUOUS = {
    "'s": ("has", "is"),
    "'d": ("had", "would"),
}


def _participle_ahead(words: Sequence[str], position: int, lex: Lexicon) -> bool:
    return (
        position + 1 < len(words) and lex.is_past_participle(words[position + 1])
    ) or (
        position + 2 < len(words) and lex.is_past_participle(words[position + 2])
    )


def expansion_for(words: Sequence[str], position: int, lex: Lexicon) -> Optional[str]:
    """Auxiliary hidden in the contraction at `position`, if any."""
    word = clean(words[position])
    cut = word.rfind("'")
    if cut < 0:
        return None

    prefix, suffix = word[:cut], word[cut:]
    if not lex.is_basic_pronoun(prefix):
        return None

    if suffix in _SUFFIXES:
        return _SUFFIXES[suffix]
    if suffix in _AMBIGUOUS:
        with_participle, otherwise = _AMBIGUOUS[suffix]
        return with_participle if _participle_ahead(words, position, lex) else otherwise
    return None


def expand_tokens(words: Sequence[str], lex: Lexicon) -> list[str]:
    """Expand every pronoun contraction; the result may hold two-word tokens."""
    result = list(words)
    for position, word in enumerate(words):
        expansion = expansion_for(words, position, lex)
        if expansion is not None:
            prefix = word[: word.rfind("'")]
            result[position] = f"{prefix} {expansion}"
    return result


def expand_contractions(text: str, lex: Lexicon) -> str:
    """Expand pronoun contractions in whitespace-tokenized text."""
    return join_tokens(expand_tokens(text.split(), lex))
