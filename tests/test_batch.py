"""
Unit tests for batch negation.
"""

from datetime import datetime

import pytest

from polarity.batch import negate_posts
from polarity.ir.schema import PostRecord


class TestNegatePosts:
    """Tests for negate_posts."""

    def test_ids_and_text(self, engine):
        records = negate_posts(["I will go.", "She sleeps."], engine=engine)
        assert [r.id for r in records] == [1, 2]
        assert [r.inverted for r in records] == ["I won't go.", "She doesn't sleep."]
        assert records[0].original == "I will go."

    def test_order_kept_with_workers(self, engine):
        """Verify threaded runs keep input order."""
        posts = ["I will go.", "She sleeps.", "He has done it.", "I won't go."] * 5
        serial = negate_posts(posts, engine=engine)
        threaded = negate_posts(posts, workers=4, engine=engine)
        assert [r.inverted for r in threaded] == [r.inverted for r in serial]

    def test_created_at(self, engine):
        """Verify (text, created_at) pairs keep their timestamp."""
        when = datetime(2020, 5, 17, 12, 30)
        records = negate_posts([("She sleeps.", when), "I will go."], engine=engine)
        assert records[0].created_at == when
        assert records[1].created_at is None

    def test_empty(self, engine):
        assert negate_posts([], engine=engine) == []

    def test_bad_workers(self, engine):
        with pytest.raises(ValueError):
            negate_posts(["I will go."], workers=0, engine=engine)


class TestPostRecord:
    """Tests for the display helpers."""

    def test_lines(self):
        record = PostRecord(
            id=1,
            original="I will go. She sleeps.",
            inverted="I won't go. She doesn't sleep.",
        )
        assert record.original_lines == "I will go.\nShe sleeps."
        assert record.inverted_lines == "I won't go.\nShe doesn't sleep."

    def test_id_starts_at_one(self):
        with pytest.raises(ValueError):
            PostRecord(id=0, original="a", inverted="a")
