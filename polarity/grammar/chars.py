"""
Character classes used by the normalizer and by restyle.

Every class is a frozenset of single characters.
"""

# Characters that want a space after them: "word, word"
SPACE_AFTER = frozenset(",;:)]}%.!?")

# Characters that want a space before them: "word (word"
SPACE_BEFORE = frozenset("{([")

# Characters that want spaces on both sides: "a - b"
SPACES_AROUND = frozenset("&+*-/")

QUOTES = frozenset("'\"")

# Sentence-ending punctuation
PUNCTUATION = frozenset(".!?")

SPECIAL = SPACE_AFTER | SPACE_BEFORE | SPACES_AROUND | QUOTES

# Typographic variants and their plain-ASCII replacements
UNCOVERED = (
    ("…", "."),   # ellipsis
    ("’", "'"),   # right single quote
    ("‘", "'"),   # left single quote
    ("`", "'"),
    ("—", "-"),   # em dash
    ("–", "-"),   # en dash
    ("”", '"'),   # right double quote
    ("“", '"'),   # left double quote
)


def is_special(char: str) -> bool:
    return char in SPECIAL


def _allowed_pairs() -> frozenset:
    closers = "\"')}]"
    pairs = {".."}
    for mark in ".?!,":
        for closer in closers:
            pairs.add(mark + closer)
            pairs.add(closer + mark)
    for quote in "\"'":
        for bracket in "(){}[]":
            pairs.add(quote + bracket)
            pairs.add(bracket + quote)
    pairs.update({":/", "//"})
    return frozenset(pairs)


# Ordered pairs of adjacent special characters that are kept
ALLOWED_PAIRS = _allowed_pairs()


def is_allowed_pair(first: str, second: str) -> bool:
    return first + second in ALLOWED_PAIRS
