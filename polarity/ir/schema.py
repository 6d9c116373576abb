"""
IR Schema — Pydantic models for negation results.

The result keeps the original text next to its inverted counterpart,
sentence by sentence, with the trace and diagnostics that explain it.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from polarity import __ir_version__
from polarity.ir.enums import DiagnosticLevel, SentenceStatus, TransformStatus

IR_VERSION = __ir_version__

# Whitespace after sentence punctuation that precedes a capital letter
SENTENCE_BREAK = re.compile(r"(?<=[.?!;])\s+(?=[A-ZÀ-Þ])")


def split_sentences(text: str) -> list[str]:
    """Split text into sentences on `. ? ! ;` followed by a capital letter."""
    if not text:
        return []
    return [s for s in SENTENCE_BREAK.split(text) if s]


class SentenceRecord(BaseModel):
    """One sentence of the post, before and after inversion."""

    id: str = Field(..., description="Unique sentence identifier")
    text: str = Field(..., description="Sentence after normalization")
    inverted_text: Optional[str] = Field(None, description="Sentence after inversion")
    status: SentenceStatus = Field(default=SentenceStatus.UNCHANGED)

    @property
    def tokens(self) -> list[str]:
        """Whitespace tokens; one slot per normalized token."""
        return self.text.split()


class TraceEntry(BaseModel):
    """A single transformation trace entry."""

    id: str
    timestamp: datetime
    pass_name: str
    action: str
    before: Optional[str] = None
    after: Optional[str] = None
    affected_ids: list[str] = Field(default_factory=list)


class Diagnostic(BaseModel):
    """A diagnostic message."""

    id: str
    level: DiagnosticLevel
    code: str
    message: str
    source: str
    affected_ids: list[str] = Field(default_factory=list)


class InversionResult(BaseModel):
    """The complete output of negating one post."""

    version: str = Field(default=IR_VERSION, description="IR schema version")
    request_id: str = Field(..., description="Unique request ID")
    timestamp: datetime = Field(..., description="When the inversion started")
    processing_duration_ms: Optional[float] = None

    original_text: str = Field(..., description="Text as received")
    normalized_text: str = Field(default="", description="Text after cleanup and contraction expansion")
    inverted_text: Optional[str] = Field(None, description="Negated / affirmed text")

    sentences: list[SentenceRecord] = Field(default_factory=list)
    trace: list[TraceEntry] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    status: TransformStatus = Field(default=TransformStatus.SUCCESS)

    @property
    def output_text(self) -> str:
        """The text to show: inverted text, or the original on failure."""
        if self.status == TransformStatus.ERROR or self.inverted_text is None:
            return self.original_text
        return self.inverted_text


class PostRecord(BaseModel):
    """A post as a feed consumer displays it: original next to inverted."""

    id: int = Field(..., ge=1, description="Running post counter")
    created_at: Optional[datetime] = None
    original: str
    inverted: str

    @property
    def original_lines(self) -> str:
        """Original text, one sentence per line."""
        return "\n".join(split_sentences(self.original))

    @property
    def inverted_lines(self) -> str:
        """Inverted text, one sentence per line."""
        return "\n".join(split_sentences(self.inverted))
