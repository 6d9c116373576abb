"""
Lexicon Schema — Pydantic models for the YAML word-list files.

Each file under lexicon/data is validated against one of these models
before the immutable Lexicon is built from it.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

VERB_FORM_COUNT = 5


def _lower_all(words: list[str]) -> list[str]:
    return [w.strip().lower() for w in words if w and w.strip()]


def _lower_map(mapping: dict[str, str]) -> dict[str, str]:
    return {k.strip().lower(): v.strip().lower() for k, v in mapping.items()}


def _two_words(phrases: list[str]) -> list[str]:
    result = []
    for phrase in phrases:
        parts = phrase.split()
        if len(parts) != 2:
            raise ValueError(f"phrase must have exactly two words: {phrase!r}")
        result.append(" ".join(parts).lower())
    return result


# ============================================================================
# verbs.yaml
# ============================================================================

class VerbsFile(BaseModel):
    """Lexical verbs and verb-specific tables."""

    forms: list[str] = Field(
        ...,
        description="One line per verb: infinitive perfect participle third-person gerund",
    )
    two_part_verbs: dict[str, str] = Field(
        default_factory=dict,
        description="Two-word verb phrase (noun + infinitive) -> noun half",
    )
    start_stop: dict[str, str] = Field(default_factory=dict)
    clause_openers: list[str] = Field(default_factory=list)

    @field_validator("forms")
    @classmethod
    def _five_forms(cls, lines: list[str]) -> list[str]:
        for line in lines:
            if len(line.split()) != VERB_FORM_COUNT:
                raise ValueError(
                    f"verb entry needs {VERB_FORM_COUNT} forms: {line!r}"
                )
        return [" ".join(line.split()).lower() for line in lines]

    @field_validator("two_part_verbs", "start_stop")
    @classmethod
    def _lower_maps(cls, mapping: dict[str, str]) -> dict[str, str]:
        return _lower_map(mapping)

    @field_validator("clause_openers")
    @classmethod
    def _lower_lists(cls, words: list[str]) -> list[str]:
        return _lower_all(words)


# ============================================================================
# auxiliaries.yaml
# ============================================================================

class PolarityPairs(BaseModel):
    """Positive forms with their negative, and the reverse."""

    positive: dict[str, str] = Field(default_factory=dict)
    negative: dict[str, str] = Field(default_factory=dict)

    @field_validator("positive", "negative")
    @classmethod
    def _lower_maps(cls, mapping: dict[str, str]) -> dict[str, str]:
        return _lower_map(mapping)


class AuxiliariesFile(BaseModel):
    modals: PolarityPairs
    do: PolarityPairs
    be: PolarityPairs
    have: PolarityPairs


# ============================================================================
# nouns.yaml / names.yaml
# ============================================================================

class NounsFile(BaseModel):
    singular: list[str] = Field(default_factory=list)
    plural: list[str] = Field(default_factory=list)
    articles: list[str] = Field(default_factory=list)

    @field_validator("singular", "plural", "articles")
    @classmethod
    def _lower_lists(cls, words: list[str]) -> list[str]:
        return _lower_all(words)


class NamesFile(BaseModel):
    first: list[str] = Field(default_factory=list)
    last: list[str] = Field(default_factory=list)

    @field_validator("first", "last")
    @classmethod
    def _lower_lists(cls, words: list[str]) -> list[str]:
        return _lower_all(words)


# ============================================================================
# pronouns.yaml
# ============================================================================

class PronounsFile(BaseModel):
    singular: list[str] = Field(default_factory=list)
    plural: list[str] = Field(default_factory=list)
    possessive: list[str] = Field(default_factory=list)
    object: list[str] = Field(default_factory=list)
    indefinite: dict[str, str] = Field(
        default_factory=dict,
        description="every- pronoun -> no- pronoun",
    )
    negative_indefinite: dict[str, str] = Field(
        default_factory=dict,
        description="no- pronoun -> some- pronoun",
    )

    @field_validator("singular", "plural", "possessive", "object")
    @classmethod
    def _lower_lists(cls, words: list[str]) -> list[str]:
        return _lower_all(words)

    @field_validator("indefinite", "negative_indefinite")
    @classmethod
    def _lower_maps(cls, mapping: dict[str, str]) -> dict[str, str]:
        return _lower_map(mapping)


# ============================================================================
# function_words.yaml
# ============================================================================

class Conjunctions(BaseModel):
    sentence: list[str] = Field(default_factory=list)
    other: list[str] = Field(default_factory=list)


class Interrogatives(BaseModel):
    skip: list[str] = Field(default_factory=list)
    push: list[str] = Field(default_factory=list)
    negate: list[str] = Field(default_factory=list)


class FunctionWordsFile(BaseModel):
    prepositions: list[str] = Field(default_factory=list)
    conjunctions: Conjunctions = Field(default_factory=Conjunctions)
    interrogatives: Interrogatives = Field(default_factory=Interrogatives)
    adjectives: list[str] = Field(default_factory=list)
    clean_up: list[str] = Field(
        default_factory=list,
        description="Adverbs deleted next to a freshly inverted verb",
    )

    @field_validator("prepositions", "adjectives", "clean_up")
    @classmethod
    def _lower_lists(cls, words: list[str]) -> list[str]:
        return _lower_all(words)


# ============================================================================
# phrases.yaml
# ============================================================================

class SkipPhrases(BaseModel):
    current_next: list[str] = Field(default_factory=list)
    previous_current: list[str] = Field(default_factory=list)
    before_previous: list[str] = Field(default_factory=list)

    @field_validator("current_next", "previous_current", "before_previous")
    @classmethod
    def _pairs(cls, phrases: list[str]) -> list[str]:
        return _two_words(phrases)


class PhrasesFile(BaseModel):
    skip: SkipPhrases = Field(default_factory=SkipPhrases)
    sub_sentence: list[str] = Field(default_factory=list)

    @field_validator("sub_sentence")
    @classmethod
    def _pairs(cls, phrases: list[str]) -> list[str]:
        return _two_words(phrases)
