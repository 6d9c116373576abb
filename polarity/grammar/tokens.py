"""
Token helpers — cleaning, restyling and reassembly.

A sentence is a list of whitespace tokens. Positions in that list are
used as cross-references for the whole clause, so a deleted token is
replaced by "" and never removed.
"""

import re
from typing import Iterable

from polarity.grammar.chars import is_special

# Letters, digits, apostrophe, hyphen and whitespace survive cleaning
_NOT_WORD_CHAR = re.compile(r"[^A-Za-z0-9'\-\s]")

DELETED = ""


def clear_special_chars(word: str) -> str:
    """Drop everything but ASCII letters, digits, apostrophes, hyphens and spaces."""
    if not word:
        return ""
    return _NOT_WORD_CHAR.sub("", word)


def clean(word: str) -> str:
    """Lookup form of a token: special characters removed, lower-cased."""
    return clear_special_chars(word).lower()


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def restyle(original: str, replacement: str) -> str:
    """
    Render `replacement` in the style of the token it replaces.

    Casing follows the original (ALL CAPS, Capitalized or lower) and
    the original's leading special character and its last one or two
    trailing special characters are carried over:

        restyle("Everybody", "nobody")  -> "Nobody"
        restyle("sleeps.", "doesn't sleep") -> "doesn't sleep."
        restyle("WILL", "won't")         -> "WON'T"
    """
    sample = clear_special_chars(original)
    result = clean(replacement)

    if sample.isupper():
        result = result.upper()
    elif sample and sample == _capitalize(sample):
        result = _capitalize(result)
    else:
        result = result.lower()

    if not original:
        return result

    if is_special(original[0]):
        result = original[0] + result

    if len(original) > 1:
        if is_special(original[-2]) and is_special(original[-1]):
            result += original[-2]
        if is_special(original[-1]):
            result += original[-1]

    return result


def join_tokens(tokens: Iterable[str]) -> str:
    """Join tokens with single spaces, skipping deleted ones."""
    return " ".join(token for token in tokens if token)


def is_adverb(word: str) -> bool:
    """Heuristic adverb test: "-ly" words plus a few fixed ones."""
    word = clean(word)
    return (len(word) > 2 and word.endswith("ly")) or word == "hereby"


def has_comma(word: str) -> bool:
    return len(word) > 1 and word.endswith(",")


def is_quote_token(word: str) -> bool:
    """Token opens or closes a quotation."""
    if not word:
        return False
    return word[0] in "\"'" or word[-1] in "\"'"


def opens_quote(word: str) -> bool:
    return bool(word) and word[0] in "\"'"
