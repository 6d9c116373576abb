"""
Unit tests for the engine.
"""

from polarity.core.context import InversionRequest
from polarity.core.engine import DEFAULT_PIPELINE, Engine, Pipeline, negate
from polarity.ir.enums import SentenceStatus, TransformStatus
from polarity.ir.serialization import from_json, to_json
from polarity.passes import normalize


def _boom(ctx):
    raise RuntimeError("boom")


class TestEngine:
    """Tests for pipeline orchestration."""

    def test_default_registered(self, engine):
        assert engine.list_pipelines() == [DEFAULT_PIPELINE]

    def test_result_fields(self, engine):
        """Verify the result carries sentences and a trace."""
        result = engine.transform(InversionRequest(text="I'm happy. She sleeps."))
        assert result.status == TransformStatus.SUCCESS
        assert result.original_text == "I'm happy. She sleeps."
        assert result.normalized_text == "I am happy. She sleeps."
        assert result.inverted_text == "I am not happy. She doesn't sleep."
        assert [s.status for s in result.sentences] == [SentenceStatus.INVERTED] * 2
        assert [t.pass_name for t in result.trace] == [
            "p00_normalize",
            "p10_expand_contractions",
            "p20_split_sentences",
            "p30_invert",
            "p40_reassemble",
        ]

    def test_request_id_kept(self, engine):
        result = engine.transform(InversionRequest(text="I will go.", request_id="req-1"))
        assert result.request_id == "req-1"

    def test_unknown_pipeline(self, engine):
        """Verify an unknown pipeline yields an error result with the original text."""
        result = engine.transform(InversionRequest(text="I will go."), "nope")
        assert result.status == TransformStatus.ERROR
        assert result.diagnostics[0].code == "PIPELINE_NOT_FOUND"
        assert result.output_text == "I will go."

    def test_failing_pass(self, lexicon):
        """Verify a raising pass stops the pipeline with PASS_ERROR."""
        engine = Engine(lexicon=lexicon)
        engine.register_pipeline(Pipeline(id="broken", name="Broken", passes=[normalize, _boom]))

        result = engine.transform(InversionRequest(text="I will go."), "broken")
        assert result.status == TransformStatus.ERROR
        assert result.diagnostics[0].code == "PASS_ERROR"
        assert "boom" in result.diagnostics[0].message
        assert result.trace[-1].action == "error"
        assert result.output_text == "I will go."

    def test_json_round_trip(self, engine):
        """Verify a result survives JSON serialization."""
        result = engine.transform(InversionRequest(text="She sleeps."))
        restored = from_json(to_json(result))
        assert restored.inverted_text == result.inverted_text
        assert restored.sentences == result.sentences


class TestNegateFunction:
    """Tests for the negate convenience function."""

    def test_error_returns_input(self, lexicon):
        """Verify a failing pipeline gives back the input."""
        engine = Engine(lexicon=lexicon)
        engine.register_pipeline(Pipeline(id=DEFAULT_PIPELINE, name="Broken", passes=[_boom]))
        assert negate("I will go.", engine) == "I will go."

    def test_exception_returns_input(self, lexicon):
        """Verify an exception escaping the engine is swallowed."""

        class ExplodingEngine(Engine):
            def transform(self, request, pipeline_id=None):
                raise RuntimeError("engine down")

        assert negate("I will go.", ExplodingEngine(lexicon=lexicon)) == "I will go."

    def test_global_engine(self):
        """Verify the global engine is used when none is given."""
        assert negate("I will go.") == "I won't go."
