"""
Lexicon Loader

Load and validate the word lists from YAML files and build the
immutable Lexicon.

The default data directory ships inside the package; set
POLARITY_LEXICON_DIR to load a different one.
"""

from __future__ import annotations

import os
from pathlib import Path
from types import MappingProxyType
from typing import Optional, TypeVar, Union

import yaml
from pydantic import BaseModel, ValidationError

from polarity.core.logging import LogChannel, get_logger
from polarity.errors import LexiconError
from polarity.ir.enums import VerbForm
from polarity.lexicon.models import Lexicon
from polarity.lexicon.schema import (
    AuxiliariesFile,
    FunctionWordsFile,
    NamesFile,
    NounsFile,
    PhrasesFile,
    PronounsFile,
    VerbsFile,
)

log = get_logger(LogChannel.LEXICON)

DATA_DIR = Path(__file__).parent / "data"
LEXICON_DIR_ENV = "POLARITY_LEXICON_DIR"

# Verb table column order in verbs.yaml
_COLUMNS = (
    VerbForm.INFINITIVE,
    VerbForm.PERFECT,
    VerbForm.PARTICIPLE,
    VerbForm.THIRD_PERSON,
    VerbForm.GERUND,
)

M = TypeVar("M", bound=BaseModel)

# Lexicon cache
_cache: Optional[Lexicon] = None


def get_lexicon_dir() -> Path:
    """Directory the default lexicon is loaded from."""
    override = os.environ.get(LEXICON_DIR_ENV)
    if override:
        return Path(override)
    return DATA_DIR


def _read(directory: Path, name: str, model: type[M]) -> M:
    """Read one YAML file and validate it."""
    path = directory / f"{name}.yaml"

    if not path.exists():
        raise LexiconError(f"Lexicon file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LexiconError(f"Lexicon file is not valid YAML: {path}: {e}") from e

    try:
        return model.model_validate(data or {})
    except ValidationError as e:
        raise LexiconError(f"Invalid lexicon file {path}: {e}") from e


def _frozen(mapping: dict) -> MappingProxyType:
    return MappingProxyType(dict(mapping))


def _pairs(phrases: list[str]) -> tuple[tuple[str, str], ...]:
    return tuple(tuple(p.split()) for p in phrases)  # type: ignore[misc]


def _verb_tables(verbs: VerbsFile) -> dict:
    """Build form, infinitive, third-person and perfect tables."""
    forms: dict[str, set[VerbForm]] = {}
    infinitives: dict[str, str] = {}
    third_persons: dict[str, str] = {}
    perfects: dict[str, str] = {}

    for line in verbs.forms:
        words = line.split()
        infinitive = words[0]
        for column, word in zip(_COLUMNS, words):
            forms.setdefault(word, set()).add(column)
            # First entry wins for forms shared by two verbs ("found")
            infinitives.setdefault(word, infinitive)
        third_persons[infinitive] = words[3]
        perfects[infinitive] = words[1]

    return {
        "verb_forms": _frozen({w: frozenset(f) for w, f in forms.items()}),
        "infinitives": _frozen(infinitives),
        "third_persons": _frozen(third_persons),
        "perfects": _frozen(perfects),
    }


def load_lexicon(directory: Union[Path, str, None] = None) -> Lexicon:
    """
    Load a lexicon from a directory of YAML files.

    Args:
        directory: Directory holding verbs.yaml, auxiliaries.yaml, ...
            (default: POLARITY_LEXICON_DIR or the bundled data)

    Returns:
        Immutable Lexicon

    Raises:
        LexiconError: If a file is missing, unreadable or invalid
    """
    directory = Path(directory) if directory is not None else get_lexicon_dir()

    if not directory.is_dir():
        raise LexiconError(f"Lexicon directory not found: {directory}")

    verbs = _read(directory, "verbs", VerbsFile)
    aux = _read(directory, "auxiliaries", AuxiliariesFile)
    nouns = _read(directory, "nouns", NounsFile)
    names = _read(directory, "names", NamesFile)
    pronouns = _read(directory, "pronouns", PronounsFile)
    function_words = _read(directory, "function_words", FunctionWordsFile)
    phrases = _read(directory, "phrases", PhrasesFile)

    lexicon = Lexicon(
        **_verb_tables(verbs),
        two_part_verbs=_frozen(verbs.two_part_verbs),
        start_stop=_frozen(verbs.start_stop),
        clause_openers=frozenset(verbs.clause_openers),
        positive_modals=_frozen(aux.modals.positive),
        negative_modals=_frozen(aux.modals.negative),
        positive_do=_frozen(aux.do.positive),
        negative_do=_frozen(aux.do.negative),
        positive_be=_frozen(aux.be.positive),
        negative_be=_frozen(aux.be.negative),
        positive_have=_frozen(aux.have.positive),
        negative_have=_frozen(aux.have.negative),
        singular_nouns=frozenset(nouns.singular),
        plural_nouns=frozenset(nouns.plural),
        articles=frozenset(nouns.articles),
        names=frozenset(names.first) | frozenset(names.last),
        singular_pronouns=frozenset(pronouns.singular),
        plural_pronouns=frozenset(pronouns.plural),
        possessive_pronouns=frozenset(pronouns.possessive),
        object_pronouns=frozenset(pronouns.object),
        indefinite_pronouns=_frozen(pronouns.indefinite),
        negative_indefinite_pronouns=_frozen(pronouns.negative_indefinite),
        prepositions=frozenset(function_words.prepositions),
        sentence_conjunctions=frozenset(w.lower() for w in function_words.conjunctions.sentence),
        other_conjunctions=frozenset(w.lower() for w in function_words.conjunctions.other),
        skip_interrogatives=frozenset(w.lower() for w in function_words.interrogatives.skip),
        push_interrogatives=frozenset(w.lower() for w in function_words.interrogatives.push),
        negate_interrogatives=frozenset(w.lower() for w in function_words.interrogatives.negate),
        adjectives=frozenset(function_words.adjectives),
        clean_up_words=tuple(function_words.clean_up),
        current_next_phrases=_pairs(phrases.skip.current_next),
        previous_current_phrases=_pairs(phrases.skip.previous_current),
        before_previous_phrases=_pairs(phrases.skip.before_previous),
        sub_sentence_phrases=_pairs(phrases.sub_sentence),
        source=str(directory),
    )

    log.info(
        "lexicon_loaded",
        directory=str(directory),
        verb_forms=len(lexicon.verb_forms),
        nouns=len(lexicon.singular_nouns) + len(lexicon.plural_nouns),
        names=len(lexicon.names),
    )

    return lexicon


def get_lexicon(use_cache: bool = True) -> Lexicon:
    """
    Get the process-wide lexicon, loading it on first use.

    Args:
        use_cache: Whether to reuse a previously loaded lexicon

    Returns:
        Immutable Lexicon
    """
    global _cache

    if use_cache and _cache is not None:
        return _cache

    lexicon = load_lexicon()
    _cache = lexicon
    return lexicon


def clear_cache() -> None:
    """Drop the cached lexicon (next get_lexicon() reloads)."""
    global _cache
    _cache = None
    log.verbose("lexicon_cache_cleared")
