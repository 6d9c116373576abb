"""
Pass 20 — Sentence Splitting

Splits the expanded text into sentences. A sentence ends at `.`, `?`,
`!` or `;` when the next word starts with a capital letter. Every
sentence is inverted on its own.
"""

from polarity.core.context import InversionContext
from polarity.core.logging import get_pass_logger
from polarity.ir.schema import SentenceRecord, split_sentences as split_text

PASS_NAME = "p20_split_sentences"
log = get_pass_logger(PASS_NAME)


def split_sentences(ctx: InversionContext) -> InversionContext:
    text = ctx.expanded_text or ctx.normalized_text
    if not text:
        ctx.add_diagnostic(
            level="warning",
            code="EMPTY_INPUT",
            message="Normalized text is empty",
            source=PASS_NAME,
        )
        return ctx

    ctx.sentences = [
        SentenceRecord(id=f"sent_{i:03d}", text=sentence)
        for i, sentence in enumerate(split_text(text))
    ]

    log.verbose("sentences_split", count=len(ctx.sentences))
    ctx.add_trace(
        pass_name=PASS_NAME,
        action="split_sentences",
        after=f"{len(ctx.sentences)} sentences",
    )

    return ctx
