"""
Pass 10 — Contraction Expansion

Spells out pronoun contractions ("I'm", "it's", "they'd") so that the
auxiliary owns its own token position during clause scanning.
"""

from polarity.core.context import InversionContext
from polarity.core.logging import get_pass_logger
from polarity.grammar.contractions import expand_tokens
from polarity.grammar.tokens import join_tokens

PASS_NAME = "p10_expand_contractions"
log = get_pass_logger(PASS_NAME)


def expand_contractions(ctx: InversionContext) -> InversionContext:
    """Expand pronoun contractions in the normalized text."""
    words = ctx.normalized_text.split()
    expanded = expand_tokens(words, ctx.lexicon)

    changed = sum(1 for before, after in zip(words, expanded) if before != after)
    ctx.expanded_text = join_tokens(expanded)

    if changed:
        log.verbose("contractions_expanded", count=changed)

    ctx.add_trace(
        pass_name=PASS_NAME,
        action="expanded_contractions",
        after=f"{changed} contractions",
    )

    return ctx
