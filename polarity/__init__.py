"""
Polarity — English sentence negation engine.

A deterministic, rule-based pipeline that turns a post into its
grammatically negated (or de-negated) counterpart:

    "I will go."            -> "I won't go."
    "Everybody loves this." -> "Nobody loves this."

No parse tree, no statistics. A hand-built lexicon and a clause
state machine decide where the negation goes.
"""

__version__ = "0.1.0"
__ir_version__ = "0.1.0"
