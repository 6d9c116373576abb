"""
Pass 30 — Clause Inversion

Runs the clause scanner over every sentence. A sentence whose scan
faults is kept as it was and reported with an INVERSION_FAILED
diagnostic; the other sentences are unaffected.
"""

from polarity.core.context import InversionContext
from polarity.core.logging import bind_request_context, get_pass_logger, unbind_request_context
from polarity.grammar.scanner import invert_sentence
from polarity.grammar.tokens import join_tokens
from polarity.ir.enums import SentenceStatus, TransformStatus

PASS_NAME = "p30_invert"
log = get_pass_logger(PASS_NAME)


def invert(ctx: InversionContext) -> InversionContext:
    """
    Invert the polarity of every clause of every sentence.

    Sets on each sentence:
    - inverted_text: the rewritten sentence (or the original on failure)
    - status: INVERTED, UNCHANGED or FAILED
    """
    inverted = 0

    for sentence in ctx.sentences:
        bind_request_context(sentence_id=sentence.id)
        try:
            words = invert_sentence(sentence.tokens, ctx.lexicon)
        except Exception as e:
            sentence.inverted_text = sentence.text
            sentence.status = SentenceStatus.FAILED
            log.warning(
                "sentence_failed",
                sentence_id=sentence.id,
                error_type=type(e).__name__,
                error=str(e),
            )
            ctx.add_diagnostic(
                level="warning",
                code="INVERSION_FAILED",
                message=f"Sentence kept unchanged: {type(e).__name__}: {e}",
                source=PASS_NAME,
                affected_ids=[sentence.id],
            )
            continue

        sentence.inverted_text = join_tokens(words)
        if sentence.inverted_text != sentence.text:
            sentence.status = SentenceStatus.INVERTED
            inverted += 1
        else:
            sentence.status = SentenceStatus.UNCHANGED

        log.debug(
            "sentence_inverted",
            sentence_id=sentence.id,
            before=sentence.text,
            after=sentence.inverted_text,
        )

    unbind_request_context("sentence_id")

    failed = ctx.failed_sentences()
    if failed:
        ctx.status = TransformStatus.PARTIAL

    log.info(
        "inverted",
        sentences=len(ctx.sentences),
        inverted=inverted,
        failed=len(failed),
    )
    ctx.add_trace(
        pass_name=PASS_NAME,
        action="inverted_sentences",
        after=f"{inverted} inverted, {len(failed)} failed",
        affected_ids=[s.id for s in failed],
    )

    return ctx
