"""CLI — Command-line interface for polarity."""
