"""
Pass 40 — Reassembly

Joins the inverted sentences back into one text.
"""

from polarity.core.context import InversionContext
from polarity.core.logging import get_pass_logger
from polarity.grammar.tokens import join_tokens

PASS_NAME = "p40_reassemble"
log = get_pass_logger(PASS_NAME)


def reassemble(ctx: InversionContext) -> InversionContext:
    ctx.inverted_text = join_tokens(
        (s.inverted_text if s.inverted_text is not None else s.text).strip()
        for s in ctx.sentences
    )

    log.verbose("reassembled", output_chars=len(ctx.inverted_text))
    ctx.add_trace(
        pass_name=PASS_NAME,
        action="reassembled_text",
        before=ctx.expanded_text or ctx.normalized_text,
        after=ctx.inverted_text,
    )

    return ctx
