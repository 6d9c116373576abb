"""
IR — Intermediate Representation

Enums and result models shared by every layer of the engine.
"""

from polarity.ir.enums import (
    ClauseEvent,
    DiagnosticLevel,
    PolarityShift,
    SentenceStatus,
    TransformStatus,
    VerbForm,
)
from polarity.ir.schema import (
    Diagnostic,
    InversionResult,
    PostRecord,
    SentenceRecord,
    TraceEntry,
    split_sentences,
)

__all__ = [
    # Enums
    "VerbForm",
    "PolarityShift",
    "ClauseEvent",
    "SentenceStatus",
    "DiagnosticLevel",
    "TransformStatus",
    # Models
    "SentenceRecord",
    "TraceEntry",
    "Diagnostic",
    "InversionResult",
    "PostRecord",
    "split_sentences",
]
