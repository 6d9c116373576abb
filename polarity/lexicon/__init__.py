"""
Lexicon — word classes and verb-form tables, loaded from YAML.
"""

from polarity.lexicon.loader import clear_cache, get_lexicon, load_lexicon
from polarity.lexicon.models import Lexicon

__all__ = [
    "Lexicon",
    "load_lexicon",
    "get_lexicon",
    "clear_cache",
]
