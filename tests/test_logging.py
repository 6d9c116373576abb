"""
Tests for the channel logging layer.
"""

import pytest
from structlog.contextvars import get_contextvars

from polarity.core.logging import (
    InversionLogger,
    LogChannel,
    LogLevel,
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_current_config,
    get_logger,
    get_pass_logger,
    unbind_request_context,
)


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    configure_logging(level="info", format="console", channels=list(LogChannel), force=True)
    clear_request_context()


class TestConfiguration:
    """Tests for configure_logging."""

    def test_explicit_settings(self):
        configure_logging(level="verbose", format="json", channels=["grammar", "lexicon"], force=True)
        assert get_current_config() == {
            "level": "VERBOSE",
            "format": "json",
            "channels": ["GRAMMAR", "LEXICON"],
        }

    def test_unknown_channels_ignored(self):
        configure_logging(channels=["grammar", "bogus"], force=True)
        assert get_current_config()["channels"] == ["GRAMMAR"]

    def test_env_level(self, monkeypatch):
        monkeypatch.setenv("POLARITY_LOG_LEVEL", "debug")
        configure_logging(force=True)
        assert get_current_config()["level"] == "DEBUG"

    def test_no_force_keeps_config(self):
        configure_logging(level="debug", force=True)
        configure_logging(level="silent")
        assert get_current_config()["level"] == "DEBUG"


class TestParsing:
    """Tests for level and channel parsing."""

    @pytest.mark.parametrize(
        "name, level",
        [("silent", LogLevel.SILENT), ("DEBUG", LogLevel.DEBUG), ("warning", LogLevel.INFO), ("nonsense", LogLevel.INFO)],
    )
    def test_level(self, name, level):
        assert LogLevel.from_string(name) is level

    def test_channel(self):
        assert LogChannel.from_string("grammar") is LogChannel.GRAMMAR
        assert LogChannel.from_string("nope") is None


class TestChannelLogger:
    """Tests for level and channel filtering."""

    def test_filtering(self):
        configure_logging(level="verbose", channels=["grammar"], force=True)
        grammar = get_logger(LogChannel.GRAMMAR)
        assert grammar.is_enabled(LogLevel.VERBOSE)
        assert not grammar.is_enabled(LogLevel.DEBUG)
        assert not get_logger(LogChannel.LEXICON).is_enabled(LogLevel.INFO)

    def test_silent(self):
        configure_logging(level="silent", force=True)
        assert not get_logger().is_enabled(LogLevel.INFO)

    def test_string_channel(self):
        assert get_logger("inversion").channel is LogChannel.INVERSION
        assert get_logger("bogus").channel is LogChannel.SYSTEM

    @pytest.mark.parametrize(
        "pass_name, channel",
        [
            ("p00_normalize", LogChannel.NORMALIZE),
            ("p10_expand_contractions", LogChannel.NORMALIZE),
            ("p30_invert", LogChannel.INVERSION),
            ("p99_custom", LogChannel.PIPELINE),
        ],
    )
    def test_pass_logger_channel(self, pass_name, channel):
        logger = get_pass_logger(pass_name)
        assert logger.channel is channel
        assert logger.pass_name == pass_name

    def test_logging_does_not_raise(self):
        configure_logging(level="debug", force=True)
        log = get_pass_logger("p30_invert")
        log.info("event", a=1)
        log.verbose("event", b=2)
        log.debug("event", c=3)
        log.warning("event")
        log.error("event")


class TestRequestContext:
    """Tests for request-scoped context."""

    def test_bind_and_clear(self):
        bind_request_context(request_id="r1")
        bind_request_context(user="u")
        assert get_contextvars() == {"request_id": "r1", "user": "u"}
        clear_request_context()
        assert get_contextvars() == {}

    def test_unbind_one_field(self):
        bind_request_context(request_id="r1", sentence_id="sent_000")
        unbind_request_context("sentence_id")
        assert get_contextvars() == {"request_id": "r1"}

    def test_inversion_logger_clears_on_complete(self):
        tlog = InversionLogger("req-9")
        assert get_contextvars()["request_id"] == "req-9"
        tlog.pass_start("p00_normalize")
        tlog.pass_end("p00_normalize")
        tlog.inversion_complete(status="success")
        assert get_contextvars() == {}
