"""
Engine — Pipeline orchestration.

The engine selects a pipeline, runs passes in order, and packages
output. It is NOT where grammar lives.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from polarity.core.context import InversionContext, InversionRequest
from polarity.core.logging import InversionLogger, LogChannel, get_logger
from polarity.ir.enums import TransformStatus
from polarity.ir.schema import InversionResult
from polarity.lexicon.loader import get_lexicon
from polarity.lexicon.models import Lexicon

# Type alias for a pass function
PassFn = Callable[[InversionContext], InversionContext]

DEFAULT_PIPELINE = "default"

log = get_logger(LogChannel.SYSTEM)


@dataclass
class Pipeline:
    """A named sequence of passes."""

    id: str
    name: str
    passes: list[PassFn]


class Engine:
    """
    Pipeline orchestrator.

    Runs passes in order, handles errors, and packages results.
    The engine holds no per-request state, so one instance may serve
    concurrent requests.
    """

    def __init__(self, lexicon: Optional[Lexicon] = None) -> None:
        self._pipelines: dict[str, Pipeline] = {}
        self._lexicon = lexicon

    @property
    def lexicon(self) -> Lexicon:
        """The lexicon handed to every request (loaded on first use)."""
        if self._lexicon is None:
            self._lexicon = get_lexicon()
        return self._lexicon

    def register_pipeline(self, pipeline: Pipeline) -> None:
        """Register a pipeline by ID."""
        self._pipelines[pipeline.id] = pipeline

    def list_pipelines(self) -> list[str]:
        """List registered pipeline IDs."""
        return list(self._pipelines.keys())

    def transform(
        self,
        request: InversionRequest,
        pipeline_id: Optional[str] = None,
    ) -> InversionResult:
        """
        Run an inversion.

        Args:
            request: The inversion request
            pipeline_id: Which pipeline to use (default: 'default')

        Returns:
            InversionResult with sentences, trace, and diagnostics
        """
        pipeline_id = pipeline_id or DEFAULT_PIPELINE

        if pipeline_id not in self._pipelines:
            ctx = InversionContext.from_request(request, self.lexicon)
            ctx.status = TransformStatus.ERROR
            ctx.add_diagnostic(
                level="error",
                code="PIPELINE_NOT_FOUND",
                message=f"Pipeline '{pipeline_id}' not registered",
                source="engine",
            )
            return ctx.to_result()

        pipeline = self._pipelines[pipeline_id]
        ctx = InversionContext.from_request(request, self.lexicon)
        tlog = InversionLogger(request.request_id)

        for pass_fn in pipeline.passes:
            pass_name = pass_fn.__name__
            try:
                tlog.pass_start(pass_name)
                ctx = pass_fn(ctx)
                tlog.pass_end(pass_name)
            except Exception as e:
                tlog.pass_error(pass_name, e)
                ctx.status = TransformStatus.ERROR
                ctx.add_diagnostic(
                    level="error",
                    code="PASS_ERROR",
                    message=f"Pass '{pass_name}' failed: {e}",
                    source="engine",
                )
                ctx.add_trace(
                    pass_name=pass_name,
                    action="error",
                )
                break

        tlog.inversion_complete(
            status=ctx.status.value,
            sentences=len(ctx.sentences),
            failed=len(ctx.failed_sentences()),
            diagnostics=len(ctx.diagnostics),
        )

        return ctx.to_result()


def setup_default_pipeline(engine: Engine) -> None:
    """Register the default negation pipeline."""
    from polarity.passes import (
        expand_contractions,
        invert,
        normalize,
        reassemble,
        split_sentences,
    )

    engine.register_pipeline(
        Pipeline(
            id=DEFAULT_PIPELINE,
            name="Default Negation Pipeline",
            passes=[
                normalize,
                expand_contractions,
                split_sentences,
                invert,
                reassemble,
            ],
        )
    )


# Global engine instance
_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """Get or create the global engine instance (default pipeline registered)."""
    global _engine
    if _engine is None:
        engine = Engine()
        setup_default_pipeline(engine)
        _engine = engine
    return _engine


def transform(text: str, pipeline_id: Optional[str] = None) -> InversionResult:
    """
    Convenience function returning the full result for one post.

    Args:
        text: Raw post text
        pipeline_id: Which pipeline to use

    Returns:
        InversionResult
    """
    engine = get_engine()
    request = InversionRequest(text=text)
    return engine.transform(request, pipeline_id)


def negate(text: str, engine: Optional[Engine] = None) -> str:
    """
    Negate (or affirm) a post.

    Never raises: any failure yields the unmodified input.
    """
    try:
        engine = engine or get_engine()
        result = engine.transform(InversionRequest(text=text))
    except Exception as e:
        log.error("negate_failed", error=str(e), error_type=type(e).__name__)
        return text
    return result.output_text
