"""
Shared fixtures.
"""

import pytest

from polarity.core.context import InversionContext, InversionRequest
from polarity.core.engine import Engine, setup_default_pipeline
from polarity.grammar.clause import SentenceFlags, open_clause
from polarity.lexicon import get_lexicon


@pytest.fixture(scope="session")
def lexicon():
    """The bundled lexicon, loaded once per test session."""
    return get_lexicon()


@pytest.fixture
def make_context(lexicon):
    """Factory for a fresh InversionContext over some text."""

    def _make(text: str) -> InversionContext:
        return InversionContext.from_request(InversionRequest(text=text), lexicon)

    return _make


@pytest.fixture
def make_clause(lexicon):
    """Factory for a clause opened at `start` with verbs attached at `positions`."""

    def _make(words, start=0, positions=()):
        clause = open_clause(words, start, lexicon, SentenceFlags())
        for position in positions:
            assert clause.attach(words[position], position, lexicon)
        return clause

    return _make


@pytest.fixture
def engine(lexicon):
    """An engine with the default pipeline registered."""
    eng = Engine(lexicon=lexicon)
    setup_default_pipeline(eng)
    return eng
