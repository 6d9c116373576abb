"""
Structured logging for polarity, split into channels.

Every message goes to one channel and is emitted only when that channel
is enabled and the configured level is high enough:

    PIPELINE   pass orchestration and timing
    NORMALIZE  text cleanup and contraction expansion
    GRAMMAR    clause scanning and skip decisions
    INVERSION  polarity flips applied to clauses
    LEXICON    word list loading
    SYSTEM     errors and status

Levels are SILENT < INFO < VERBOSE < DEBUG. Warnings and errors are
emitted on every level but SILENT.

Environment defaults: POLARITY_LOG_LEVEL, POLARITY_LOG_FORMAT
(console/json) and POLARITY_LOG_CHANNELS (comma-separated).

Request-scoped fields (request id, sentence id) live in structlog's
context variables, so threads negating different posts never see each
other's fields.
"""

import logging
import os
import sys
import time
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Iterable, Optional, Union

import structlog
from structlog.contextvars import (
    bind_contextvars,
    clear_contextvars,
    merge_contextvars,
    unbind_contextvars,
)


class LogLevel(IntEnum):
    SILENT = 0
    INFO = 1
    VERBOSE = 2
    DEBUG = 3

    @classmethod
    def from_string(cls, s: str) -> "LogLevel":
        """Unknown names (and stdlib's warning/error) fall back to INFO."""
        try:
            return cls[s.strip().upper()]
        except KeyError:
            return cls.INFO


class LogChannel(str, Enum):
    PIPELINE = "PIPELINE"
    NORMALIZE = "NORMALIZE"
    GRAMMAR = "GRAMMAR"
    INVERSION = "INVERSION"
    LEXICON = "LEXICON"
    SYSTEM = "SYSTEM"

    @classmethod
    def from_string(cls, s: str) -> Optional["LogChannel"]:
        try:
            return cls(s.strip().upper())
        except ValueError:
            return None


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class LoggingConfig:
    level: LogLevel = LogLevel.INFO
    format: str = "console"
    channels: frozenset = field(default_factory=lambda: frozenset(LogChannel))
    configured: bool = False


_config = LoggingConfig()

_STDLIB_LEVELS = {
    LogLevel.SILENT: logging.CRITICAL + 10,
    LogLevel.INFO: logging.INFO,
    LogLevel.VERBOSE: logging.DEBUG,
    LogLevel.DEBUG: logging.DEBUG,
}


def _resolve_level(level: Union[LogLevel, str, None]) -> LogLevel:
    if level is None:
        level = os.environ.get("POLARITY_LOG_LEVEL", "info")
    if isinstance(level, str):
        return LogLevel.from_string(level)
    return level


def _resolve_channels(channels: Optional[Iterable[Union[LogChannel, str]]]) -> frozenset:
    if channels is None:
        env = os.environ.get("POLARITY_LOG_CHANNELS", "")
        channels = [name for name in env.split(",") if name.strip()]
        if not channels:
            return frozenset(LogChannel)

    resolved = set()
    for channel in channels:
        if isinstance(channel, str):
            channel = LogChannel.from_string(channel)
        if channel is not None:
            resolved.add(channel)
    return frozenset(resolved)


def _renderer(fmt: str):
    if fmt == "json":
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(
    level: Union[LogLevel, str, None] = None,
    format: Optional[str] = None,
    channels: Optional[Iterable[Union[LogChannel, str]]] = None,
    force: bool = False,
) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        level: LogLevel or its name (default: POLARITY_LOG_LEVEL or info)
        format: "console" or "json" (default: POLARITY_LOG_FORMAT or console)
        channels: Channels to emit; unknown names are ignored
            (default: POLARITY_LOG_CHANNELS or all)
        force: Reconfigure even if already configured
    """
    if _config.configured and not force:
        return

    _config.level = _resolve_level(level)
    _config.format = format or os.environ.get("POLARITY_LOG_FORMAT", "console")
    _config.channels = _resolve_channels(channels)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=_STDLIB_LEVELS[_config.level],
        force=True,
    )

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_renderer(_config.format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _config.configured = True


def get_current_config() -> dict:
    """Effective settings, with names instead of enum members."""
    return {
        "level": _config.level.name,
        "format": _config.format,
        "channels": sorted(channel.value for channel in _config.channels),
    }


# =============================================================================
# Channel Logger
# =============================================================================

class ChannelLogger:
    """
    A structlog logger tied to one channel (and optionally one pass).

    info/verbose/debug obey the configured level; warning/error are
    emitted unless logging is SILENT. Every event carries its channel.
    """

    def __init__(self, channel: LogChannel, pass_name: Optional[str] = None):
        self.channel = channel
        self.pass_name = pass_name
        self.name = f"polarity.{pass_name or channel.value.lower()}"
        self._logger = structlog.get_logger(self.name)

    def is_enabled(self, msg_level: LogLevel) -> bool:
        return self.channel in _config.channels and _config.level >= msg_level

    def _fields(self, kwargs: dict) -> dict:
        kwargs["channel"] = self.channel.value
        if self.pass_name:
            kwargs["pass"] = self.pass_name
        return kwargs

    def info(self, event: str, **kwargs: Any) -> None:
        if self.is_enabled(LogLevel.INFO):
            self._logger.info(event, **self._fields(kwargs))

    def verbose(self, event: str, **kwargs: Any) -> None:
        if self.is_enabled(LogLevel.VERBOSE):
            self._logger.debug(event, verbosity="verbose", **self._fields(kwargs))

    def debug(self, event: str, **kwargs: Any) -> None:
        if self.is_enabled(LogLevel.DEBUG):
            self._logger.debug(event, verbosity="debug", **self._fields(kwargs))

    def warning(self, event: str, **kwargs: Any) -> None:
        if _config.level is not LogLevel.SILENT:
            self._logger.warning(event, **self._fields(kwargs))

    def error(self, event: str, **kwargs: Any) -> None:
        if _config.level is not LogLevel.SILENT:
            self._logger.error(event, **self._fields(kwargs))


# Pass prefix -> channel
_PASS_CHANNELS = {
    "p00": LogChannel.NORMALIZE,
    "p10": LogChannel.NORMALIZE,
    "p20": LogChannel.PIPELINE,
    "p30": LogChannel.INVERSION,
    "p40": LogChannel.PIPELINE,
}


def get_logger(channel: Union[LogChannel, str] = LogChannel.SYSTEM) -> ChannelLogger:
    """Logger for a channel; unknown channel names map to SYSTEM."""
    configure_logging()
    if isinstance(channel, str):
        channel = LogChannel.from_string(channel) or LogChannel.SYSTEM
    return ChannelLogger(channel)


def get_pass_logger(pass_name: str, channel: Optional[LogChannel] = None) -> ChannelLogger:
    """
    Logger for a pipeline pass, e.g. "p30_invert".

    The channel follows the pass number unless given explicitly.
    """
    configure_logging()
    if channel is None:
        channel = _PASS_CHANNELS.get(pass_name[:3], LogChannel.PIPELINE)
    return ChannelLogger(channel, pass_name=pass_name)


# =============================================================================
# Request context
# =============================================================================

def bind_request_context(**kwargs: Any) -> None:
    """Add fields to every message logged by this thread until cleared."""
    bind_contextvars(**kwargs)


def unbind_request_context(*keys: str) -> None:
    unbind_contextvars(*keys)


def clear_request_context() -> None:
    clear_contextvars()


class InversionLogger:
    """
    Logs one request's trip through the pipeline.

    Binds the request id on creation, times every pass and clears the
    request context when the request completes.
    """

    def __init__(self, request_id: str):
        self.request_id = request_id
        self._log = get_logger(LogChannel.PIPELINE)
        self._started = time.perf_counter()
        self._pass_started: dict[str, float] = {}
        bind_request_context(request_id=request_id)

    @staticmethod
    def _elapsed_ms(since: float) -> float:
        return round((time.perf_counter() - since) * 1000, 2)

    def pass_start(self, pass_name: str) -> None:
        self._pass_started[pass_name] = time.perf_counter()
        self._log.verbose("pass_started", pass_name=pass_name)

    def pass_end(self, pass_name: str, **metrics: Any) -> None:
        started = self._pass_started.pop(pass_name, time.perf_counter())
        self._log.verbose(
            "pass_completed",
            pass_name=pass_name,
            duration_ms=self._elapsed_ms(started),
            **metrics,
        )

    def pass_error(self, pass_name: str, error: Exception) -> None:
        self._log.error(
            "pass_failed",
            pass_name=pass_name,
            error=str(error),
            error_type=type(error).__name__,
        )

    def inversion_complete(self, status: str, **metrics: Any) -> None:
        self._log.info(
            "inversion_complete",
            status=status,
            total_duration_ms=self._elapsed_ms(self._started),
            **metrics,
        )
        clear_request_context()
