"""
Batch negation — many posts at once, optionally across threads.

Each post gets its own request context and clause state; the only
thing the workers share is the engine's immutable lexicon.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Iterable, Optional, Union

from polarity.core.engine import Engine, get_engine, negate
from polarity.core.logging import LogChannel, get_logger
from polarity.ir.schema import PostRecord

log = get_logger(LogChannel.PIPELINE)

# A post is its text, or its text with a creation time
PostInput = Union[str, tuple[str, Optional[datetime]]]


def _unpack(post: PostInput) -> tuple[str, Optional[datetime]]:
    if isinstance(post, str):
        return post, None
    text, created_at = post
    return text, created_at


def negate_posts(
    posts: Iterable[PostInput],
    workers: int = 1,
    engine: Optional[Engine] = None,
) -> list[PostRecord]:
    """
    Negate every post, keeping input order.

    Args:
        posts: Texts, or (text, created_at) pairs
        workers: Number of worker threads (1 = run inline)
        engine: Engine to use (default: the global engine)

    Returns:
        One PostRecord per post, with ids counting from 1
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")

    engine = engine or get_engine()
    # Load the lexicon before any worker asks for it
    _ = engine.lexicon

    items = [_unpack(post) for post in posts]
    texts = [text for text, _ in items]

    if workers > 1 and len(texts) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            inverted = list(pool.map(lambda text: negate(text, engine), texts))
    else:
        inverted = [negate(text, engine) for text in texts]

    records = [
        PostRecord(id=i, created_at=created_at, original=text, inverted=result)
        for i, ((text, created_at), result) in enumerate(zip(items, inverted), start=1)
    ]

    log.info("posts_negated", posts=len(records), workers=workers)
    return records
