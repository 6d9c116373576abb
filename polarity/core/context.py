"""
InversionContext — Mutable state passed between pipeline passes.

Each pass reads prior artifacts and mutates only its allowed fields.
One context per request; nothing in it is shared between requests
except the read-only lexicon.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from polarity.ir.enums import DiagnosticLevel, SentenceStatus, TransformStatus
from polarity.ir.schema import (
    Diagnostic,
    InversionResult,
    SentenceRecord,
    TraceEntry,
)
from polarity.lexicon.models import Lexicon


@dataclass
class InversionRequest:
    """Input to the inversion pipeline."""

    text: str
    request_id: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.request_id is None:
            self.request_id = str(uuid4())


@dataclass
class InversionContext:
    """
    Mutable context passed through pipeline passes.

    Each pass may read all fields but should only mutate
    the fields it is responsible for.
    """

    # Input
    request: InversionRequest
    raw_text: str
    lexicon: Lexicon

    # Intermediate text (p00, p10)
    normalized_text: str = ""
    expanded_text: str = ""

    # Sentences (p20 creates, p30 fills inverted_text/status)
    sentences: list[SentenceRecord] = field(default_factory=list)

    # Trace and diagnostics
    trace: list[TraceEntry] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    # Output (p40)
    inverted_text: Optional[str] = None
    status: TransformStatus = TransformStatus.SUCCESS

    # Internal
    start_time: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_request(cls, request: InversionRequest, lexicon: Lexicon) -> "InversionContext":
        """Create a context from an inversion request."""
        return cls(
            request=request,
            raw_text=request.text,
            lexicon=lexicon,
        )

    def get_sentence_by_id(self, sentence_id: str) -> Optional[SentenceRecord]:
        """Get a sentence by ID."""
        for sentence in self.sentences:
            if sentence.id == sentence_id:
                return sentence
        return None

    def failed_sentences(self) -> list[SentenceRecord]:
        """Sentences that were emitted unchanged because inversion faulted."""
        return [s for s in self.sentences if s.status == SentenceStatus.FAILED]

    def add_trace(self, pass_name: str, action: str, **kwargs: Any) -> None:
        """Add a trace entry."""
        self.trace.append(
            TraceEntry(
                id=str(uuid4()),
                timestamp=datetime.now(),
                pass_name=pass_name,
                action=action,
                before=kwargs.get("before"),
                after=kwargs.get("after"),
                affected_ids=kwargs.get("affected_ids", []),
            )
        )

    def add_diagnostic(
        self,
        level: str,
        code: str,
        message: str,
        source: str,
        affected_ids: Optional[list[str]] = None,
    ) -> None:
        """Add a diagnostic message."""
        self.diagnostics.append(
            Diagnostic(
                id=str(uuid4()),
                level=DiagnosticLevel(level),
                code=code,
                message=message,
                source=source,
                affected_ids=affected_ids or [],
            )
        )

    def to_result(self) -> InversionResult:
        """Convert context to final InversionResult."""
        duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000
        return InversionResult(
            request_id=self.request.request_id or str(uuid4()),
            timestamp=self.start_time,
            processing_duration_ms=duration_ms,
            original_text=self.raw_text,
            normalized_text=self.expanded_text or self.normalized_text,
            inverted_text=self.inverted_text,
            sentences=self.sentences,
            trace=self.trace,
            diagnostics=self.diagnostics,
            status=self.status,
        )
