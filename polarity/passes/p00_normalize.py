"""
Pass 00 — Input Normalization

Cleans raw post text so that every token downstream sits on exactly
one whitespace-delimited position:
- Typographic characters replaced by their ASCII equivalents
- Quote pairing and spacing
- Stray, duplicated and misplaced punctuation
- Spacing around special characters
- Number separators and t.co links put back together
- Sentence-initial capitals
"""

import re
from typing import Callable

from polarity.core.context import InversionContext
from polarity.core.logging import get_pass_logger
from polarity.grammar.chars import (
    PUNCTUATION,
    SPACE_AFTER,
    SPACE_BEFORE,
    SPACES_AROUND,
    SPECIAL,
    UNCOVERED,
    is_allowed_pair,
    is_special,
)

PASS_NAME = "p00_normalize"
log = get_pass_logger(PASS_NAME)

# Letters before a period that mark an abbreviation, not a sentence end
ABBREVIATIONS = frozenset({"jr", "sr", "mr", "ms", "dr"})

# Distance from a candidate capital back to the abbreviation check
_MIN_DIST = 4

_SPECIAL_CLASS = "[" + re.escape("".join(sorted(SPECIAL))) + "]"
_SPACE_BETWEEN_SPECIALS = re.compile(rf"(?<={_SPECIAL_CLASS})\s+(?={_SPECIAL_CLASS})")
_QUOTED = re.compile(r'"\s*(.*?)\s*"', re.DOTALL)
_SPACE_INSIDE_OPENER = re.compile(r"([(\[{])\s+")
_SPACE_BEFORE_PERIOD = re.compile(r"\s+\.")
_SPACE_BEFORE_CLOSER = re.compile(r"\s+([?!)\]}%:,;])")
_DOTS = re.compile(r"\.{2,}")
_WHITESPACE = re.compile(r"\s+")
_NUMBER_SEPARATOR = re.compile(r"(?<=\d)([.,])\s(?=\d)")
_BROKEN_LINK = ": / / t. co / "
_PUNCTUATION_BEFORE_CLOSER = re.compile(r"([.?!,])([)\]}\"'])")
_LEADING = frozenset(SPACE_AFTER | SPACE_BEFORE | SPACES_AROUND)


def replace_uncovered_chars(text: str) -> str:
    for variant, plain in UNCOVERED:
        text = text.replace(variant, plain)
    return text


def fix_space(text: str) -> str:
    """Remove whitespace sitting between two special characters."""
    return _SPACE_BETWEEN_SPECIALS.sub("", text)


def _spaced_quote(match: re.Match) -> str:
    inner = match.group(1)
    return f' "{inner}" ' if inner else " "


def fix_quotes(text: str) -> str:
    """
    Drop every double quote when they cannot be paired; otherwise put
    a space outside each quote of a pair and none inside. An empty pair
    is dropped.
    """
    if text.count('"') % 2 == 1:
        return text.replace('"', "")
    return _QUOTED.sub(_spaced_quote, text)


def delete_unnecessary_chars(text: str) -> str:
    """Drop a special character that follows another one, unless the pair is allowed."""
    kept: list[str] = []
    for char in text:
        if kept and is_special(char) and is_special(kept[-1]) and not is_allowed_pair(kept[-1], char):
            continue
        kept.append(char)
    return "".join(kept)


def clear_space_after(text: str) -> str:
    """`( word` becomes ` (word`."""
    return _SPACE_INSIDE_OPENER.sub(r" \1", text)


def clear_space_before(text: str) -> str:
    """`word ,` becomes `word, `; `word .` becomes `word.`."""
    text = _SPACE_BEFORE_PERIOD.sub(".", text)
    return _SPACE_BEFORE_CLOSER.sub(r"\1 ", text)


def make_space_around(text: str) -> str:
    for char in sorted(SPACES_AROUND):
        text = text.replace(char, f" {char} ")
    return text


def remove_multiple_dots(text: str) -> str:
    return _DOTS.sub(".", text)


def fix_non_space(text: str) -> str:
    """
    Insert the space a character class asks for: after `,;:)]}%.!?`
    when a word follows, before `([{` when a word precedes. A period
    two characters ahead marks an abbreviation ("U.S.") and keeps it
    glued.
    """
    chars = list(text)
    result: list[str] = []
    for pos, char in enumerate(chars):
        if char in SPACE_BEFORE and result and (result[-1].isalnum() or result[-1] == "@"):
            result.append(" ")
        result.append(char)
        if char in SPACE_AFTER and pos + 2 < len(chars):
            following = chars[pos + 1]
            if (following.isalnum() or (pos > 0 and following == "@")) and chars[pos + 2] != ".":
                result.append(" ")
    return "".join(result)


def remove_multiple_spaces(text: str) -> str:
    return _WHITESPACE.sub(" ", text)


def join_number_separators(text: str) -> str:
    """`1, 000` becomes `1,000` and `3. 5` becomes `3.5`."""
    return _NUMBER_SEPARATOR.sub(r"\1", text)


def fix_links(text: str) -> str:
    return text.replace(_BROKEN_LINK, "://t.co/")


def delete_leading_special_chars(text: str) -> str:
    start = 0
    while start < len(text) and (text[start] in _LEADING or text[start].isspace()):
        start += 1
    return text[start:]


def move_punctuation(text: str) -> str:
    """Punctuation trails a closing bracket or quote: `.)` becomes `).`."""
    return _PUNCTUATION_BEFORE_CLOSER.sub(r"\2\1", text)


def _is_abbreviation(chars: list[str], pos: int) -> bool:
    marker = chars[pos - _MIN_DIST]
    if marker in (" ", "."):
        return True
    return (marker + chars[pos - _MIN_DIST + 1]).lower() in ABBREVIATIONS


def set_upper_case(text: str) -> str:
    """Capitalize the first letter after sentence punctuation and a space."""
    chars = list(text)
    for pos in range(_MIN_DIST, len(chars)):
        if (
            chars[pos - 2] in PUNCTUATION
            and chars[pos - 1] == " "
            and chars[pos].islower()
            and not _is_abbreviation(chars, pos)
        ):
            chars[pos] = chars[pos].upper()
    return "".join(chars)


# Order matters: each step relies on the spacing left by the previous ones
STEPS: tuple[Callable[[str], str], ...] = (
    replace_uncovered_chars,
    fix_space,
    fix_quotes,
    delete_unnecessary_chars,
    clear_space_after,
    clear_space_before,
    make_space_around,
    remove_multiple_dots,
    fix_non_space,
    remove_multiple_spaces,
    join_number_separators,
    fix_links,
    delete_leading_special_chars,
    remove_multiple_dots,
    move_punctuation,
    set_upper_case,
)


def normalize_text(text: str) -> str:
    """
    Run every normalization step over `text`.

    Total and deterministic; applying it twice gives the same result
    as applying it once.
    """
    for step in STEPS:
        text = step(text)
    return text.strip()


def normalize(ctx: InversionContext) -> InversionContext:
    """
    Normalize raw input text.

    This pass:
    - Replaces typographic characters
    - Repairs quotes, punctuation and spacing
    - Capitalizes sentence starts
    """
    raw = ctx.raw_text
    raw_len = len(raw)

    log.verbose("starting_normalization", input_chars=raw_len)

    text = normalize_text(raw)
    output_len = len(text)

    log.info(
        "normalized",
        input_chars=raw_len,
        output_chars=output_len,
        tokens=len(text.split()),
    )

    ctx.normalized_text = text
    ctx.add_trace(
        pass_name=PASS_NAME,
        action="normalized_input",
        before=f"{raw_len} chars",
        after=f"{output_len} chars",
    )

    return ctx
