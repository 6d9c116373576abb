"""Core — request context, pipeline engine and logging."""
