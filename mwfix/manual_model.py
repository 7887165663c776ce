"""
Manual model for words left without a tag by multi-word token splitting.

Two entry points:

* :func:`override_tag` runs an ordered list of contextual rules over
  ``(word, containing_phrase)``. The first matching rule wins, so the list
  order is significant.
* :func:`base_tag` is the last resort used when neither an override nor the
  unigram statistics produced a tag. It always returns a tag.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from .tables import (
    ACTUALLY_NAMES,
    ADJECTIVE_TAG,
    ALWAYS_NOUNS,
    COMMON_NOUN_TAG,
    DEFAULT_COMMON_NOUN_TAG,
    INDEFINITE_PRONOUN_TAG,
    INVARIABLE_NOUN_TAG,
    LEXICON,
    NUMBER_TAG,
    PERSONAL_PRONOUN_TAG,
    PREPOSITION_TAG,
    PROPER_NOUN_TAG,
    SYMBOL_TAGS,
)

logger = logging.getLogger(__name__)

UNKNOWN_WORD_TYPES = len(LEXICON)

_DIGIT = re.compile(r"\d+")
_PARTICIPLE = re.compile(r"[ai]d[oa]$")

# Some other capitalized word in the phrase ("Al Gore", Arabic names, ...)
_OTHER_NAME = re.compile(r"\b(Al\w+|A[^l]\w*|[B-Z]\w+)")

# Determiners which may also appear as pronouns
_PRONOUN_DETERMINER = re.compile(r"(tod|otr|un)[oa]s?")

# Phrases whose unknown words are most likely common nouns:
#   a trancas y barrancas / en vez de, en pos de / sin embargo /
#   merced a / pese a que
_COMMON_PHRASE = re.compile(r"^al? |^en .+ de$|sin | al?$| que$", re.IGNORECASE)


Predicate = Callable[[str, str], bool]


@dataclass(frozen=True)
class OverrideRule:
    """A contextual rule: when ``applies(word, phrase)`` holds, use ``tag``."""

    name: str
    applies: Predicate
    tag: str

    def __call__(self, word: str, phrase: str) -> Optional[str]:
        return self.tag if self.applies(word, phrase) else None


def _medio_is_noun(word: str, phrase: str) -> bool:
    return word == "medio" and (
        phrase.endswith("medio de")
        or phrase.endswith("ambiente")
        or "por medio" in phrase
        or phrase.endswith("medio")
    )


OVERRIDE_RULES: List[OverrideRule] = [
    OverrideRule("este-in-name",
                 lambda w, p: w.lower() == "este" and not p.startswith(w),
                 PROPER_NOUN_TAG),
    OverrideRule("sin-embargo",
                 lambda w, p: w == "Sin" and p.startswith("Sin embargo"),
                 PREPOSITION_TAG),
    OverrideRule("en-contra",
                 lambda w, p: w == "contra" and (p.startswith("en contra") or p.startswith("En contra")),
                 COMMON_NOUN_TAG),
    OverrideRule("ese-total",
                 lambda w, p: w == "total" and p.startswith("ese"),
                 COMMON_NOUN_TAG),
    # "Del" is a proper noun throughout the corpus, "DEL" a preposition
    OverrideRule("upper-del",
                 lambda w, p: w == "DEL",
                 PREPOSITION_TAG),
    OverrideRule("reflexive-si",
                 lambda w, p: (w == "sí" and "por sí" in p) or "fuera de sí" in p,
                 PERSONAL_PRONOUN_TAG),
    # Determiners closing a phrase are pronouns: "sobre todo", "al otro"
    OverrideRule("tailing-determiner",
                 lambda w, p: _PRONOUN_DETERMINER.fullmatch(w) is not None and p.endswith(w),
                 INDEFINITE_PRONOUN_TAG),
    OverrideRule("tailing-cuando",
                 lambda w, p: w == "cuando" and p.endswith(w),
                 INDEFINITE_PRONOUN_TAG),
    OverrideRule("tailing-contra",
                 lambda w, p: w.lower() == "contra" and p.endswith(w),
                 COMMON_NOUN_TAG),
    OverrideRule("tailing-salvo",
                 lambda w, p: w == "salvo" and p.endswith("salvo"),
                 ADJECTIVE_TAG),
    OverrideRule("tailing-mira",
                 lambda w, p: w == "mira" and p.endswith(w),
                 COMMON_NOUN_TAG),
    OverrideRule("en-pro",
                 lambda w, p: w == "pro" and p.startswith("en pro"),
                 COMMON_NOUN_TAG),
    OverrideRule("espera-de",
                 lambda w, p: w == "espera" and p.endswith("espera de"),
                 COMMON_NOUN_TAG),
    OverrideRule("el-paso",
                 lambda w, p: w == "Paso" and p == "El Paso",
                 PROPER_NOUN_TAG),
    OverrideRule("medio-noun", _medio_is_noun, COMMON_NOUN_TAG),
    OverrideRule("medio-ambiente",
                 lambda w, p: w == "Medio" and "Ambiente" in p,
                 COMMON_NOUN_TAG),
    OverrideRule("oriente-medio",
                 lambda w, p: w == "Medio" and p == "Oriente Medio",
                 ADJECTIVE_TAG),
    OverrideRule("mass-media",
                 lambda w, p: w == "media" and p == "mass media",
                 INVARIABLE_NOUN_TAG),
    # "Al" heads Arabic names, "Al Gore", ... when another capitalized word
    # is around; otherwise it is the contraction "a el"
    OverrideRule("al-in-name",
                 lambda w, p: w == "Al" and _OTHER_NAME.search(p) is not None,
                 PROPER_NOUN_TAG),
    OverrideRule("al-contraction",
                 lambda w, p: w == "Al",
                 PREPOSITION_TAG),
    OverrideRule("actually-name",
                 lambda w, p: w in ACTUALLY_NAMES,
                 PROPER_NOUN_TAG),
    OverrideRule("tailing-sino",
                 lambda w, p: w == "sino" and p.endswith(w),
                 COMMON_NOUN_TAG),
    OverrideRule("always-noun",
                 lambda w, p: w in ALWAYS_NOUNS,
                 COMMON_NOUN_TAG),
    OverrideRule("al-frente",
                 lambda w, p: w == "frente" and p.startswith("al frente"),
                 COMMON_NOUN_TAG),
]


def override_tag(word: str, containing_phrase: Optional[str]) -> Optional[str]:
    """Return the tag of the first override rule matching, or ``None``.

    Every rule needs the phrase context, so a word without a containing
    phrase never gets an override.
    """
    if containing_phrase is None:
        return None
    for rule in OVERRIDE_RULES:
        tag = rule(word, containing_phrase)
        if tag is not None:
            return tag
    return None


def base_tag(word: str, containing_phrase: Optional[str]) -> str:
    """Guess a tag for ``word`` from the lexicon and surface patterns."""
    if word in SYMBOL_TAGS:
        return SYMBOL_TAGS[word]
    if word in LEXICON:
        return LEXICON[word]

    if _DIGIT.search(word):
        return NUMBER_TAG
    if _PARTICIPLE.search(word):
        return ADJECTIVE_TAG

    if containing_phrase is not None and _COMMON_PHRASE.search(containing_phrase):
        return DEFAULT_COMMON_NOUN_TAG

    logger.warning("No POS tag for %s; guessing %s", word, PROPER_NOUN_TAG)
    return PROPER_NOUN_TAG
