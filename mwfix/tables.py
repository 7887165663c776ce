"""
Static tag tables used when resolving multi-word placeholders.

Everything here is corpus-tuned data for the AnCora (Spanish) treebank and is
read-only at runtime.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Value given to a preterminal created by splitting a multi-word token
MW_TAG = "MW?"
# Prefix of the constituent that heads the leaves of a split token; the
# original token's POS follows after the last underscore (e.g. "MW_PHRASE?_rg")
MW_PHRASE_TAG = "MW_PHRASE?"
MW_PHRASE_DELIMITER = "_"
# Any label starting with this prefix marks a multi-word constituent
MW_PREFIX = "MW"

# Original (pre-split) POS tag -> phrasal category heading the expanded
# constituent, e.g. (rg cerca_de) -> (grup.adv (rg cerca) (sp000 de))
PHRASAL_CATEGORY_MAP: Mapping[str, str] = MappingProxyType({
    "ao0000": "grup.a",
    "aq0000": "grup.a",
    "dn0000": "spec",
    "dt0000": "spec",
    "rg": "grup.adv",
    "rn": "grup.adv",  # no sólo
    "vmg0000": "grup.verb",
    "vmic000": "grup.verb",
    "vmii000": "grup.verb",
    "vmif000": "grup.verb",
    "vmip000": "grup.verb",
    "vmis000": "grup.verb",
    "vmn0000": "grup.verb",
    "vmp0000": "grup.verb",
    "vmsi000": "grup.verb",
    "vmsp000": "grup.verb",
    "zm": "grup.nom",
    # Groups not in the AnCora guidelines
    "cc": "grup.cc",
    "cs": "grup.cs",
    "i": "grup.i",
    "pr000000": "grup.pron",
    "pt000000": "grup.pron",
    "px000000": "grup.pron",
    "sp000": "grup.prep",
    "w": "grup.w",
    "z": "grup.z",
    "z0": "grup.z",
    "zp": "grup.z",
})

COMMON_NOUN_POS_PREFIX = "n"
NOMINAL_CATEGORY = "grup.nom"

# Trailing named-entity marker -> refined nominal category
NER_CATEGORIES: Mapping[str, str] = MappingProxyType({
    "l": "grup.nom.lug",
    "o": "grup.nom.org",
    "p": "grup.nom.pers",
    "0": "grup.nom.otros",
})

# Tags handed out by the manual model
PROPER_NOUN_TAG = "np00000"
COMMON_NOUN_TAG = "nc0s000"
DEFAULT_COMMON_NOUN_TAG = "ncms000"
PREPOSITION_TAG = "sp000"
ADJECTIVE_TAG = "aq0000"
PERSONAL_PRONOUN_TAG = "pp000000"
INDEFINITE_PRONOUN_TAG = "pi000000"
INVARIABLE_NOUN_TAG = "nc0n000"
NUMBER_TAG = "z0"

SYMBOL_TAGS: Mapping[str, str] = MappingProxyType({
    "%": "ft",
    "+": "fz",
    "&": "f0",
    "@": "f0",
})

# Words which never received a tag in the corpus outside multi-word tokens
LEXICON: Mapping[str, str] = MappingProxyType({
    # i.e., "metros cúbicos"
    "cúbico": "aq0000",
    "cúbicos": "aq0000",
    "diagonal": "aq0000",
    "diestro": "aq0000",
    "llevados": "aq0000",  # llevados a cabo
    "llevadas": "aq0000",  # llevadas a cabo
    "menudo": "aq0000",
    "obstante": "aq0000",
    "rapadas": "aq0000",  # cabezas rapadas
    "rasa": "aq0000",
    "súbito": "aq0000",

    "tuya": "px000000",

    # foreign words
    "alter": "nc0s000",
    "ego": "nc0s000",
    "Jet": "nc0s000",
    "lag": "nc0s000",
    "line": "nc0s000",
    "lord": "nc0s000",
    "model": "nc0s000",
    "mortem": "nc0s000",  # post-mortem
    "pater": "nc0s000",  # pater familias
    "pipe": "nc0s000",
    "play": "nc0s000",
    "pollastre": "nc0s000",
    "post": "nc0s000",
    "power": "nc0s000",
    "priori": "nc0s000",
    "rock": "nc0s000",
    "roll": "nc0s000",
    "salubritatis": "nc0s000",
    "savoir": "nc0s000",
    "service": "nc0s000",
    "status": "nc0s000",
    "stem": "nc0s000",
    "street": "nc0s000",
    "task": "nc0s000",
    "trio": "nc0s000",
    "zigzag": "nc0s000",

    # foreign words (invariable)
    "mass": "nc0n000",
    "media": "nc0n000",

    # foreign words (plural)
    "options": "nc0p000",

    # compound words, other invariables
    "regañadientes": "nc0n000",
    "sabiendas": "nc0n000",  # a sabiendas (de)

    # common gender
    "virgen": "nc0s000",

    "merced": "ncfs000",
    "miel": "ncfs000",
    "torera": "ncfs000",
    "ultranza": "ncfs000",
    "vísperas": "ncfs000",

    "acecho": "ncms000",
    "alzamiento": "ncms000",
    "bordo": "ncms000",
    "cápita": "ncms000",
    "ciento": "ncms000",
    "cuño": "ncms000",
    "pairo": "ncms000",
    "pese": "ncms000",  # pese a
    "pique": "ncms000",
    "pos": "ncms000",
    "postre": "ncms000",
    "pro": "ncms000",
    "ralentí": "ncms000",
    "ras": "ncms000",
    "rebato": "ncms000",
    "torno": "ncms000",
    "través": "ncms000",

    "creces": "ncfp000",
    "cuestas": "ncfp000",
    "oídas": "ncfp000",
    "tientas": "ncfp000",
    "trizas": "ncfp000",
    "veras": "ncfp000",

    "abuelos": "ncmp000",
    "ambages": "ncmp000",
    "modos": "ncmp000",
    "pedazos": "ncmp000",

    "amén": "rg",  # amén de

    "formaba": "vmii000",
    "perece": "vmip000",
    "tardar": "vmn0000",

    "seiscientas": "z0",
    "trescientas": "z0",
})

# Names which the unigram tagger would mark as function words (and which
# never appear as function words inside multi-word tokens)
ACTUALLY_NAMES = frozenset({
    "A",
    "Avenida",
    "Contra",
    "Gracias",  # interjection
    "in",  # only appears in corpus as "in extremis"
    "Mercado",
    "Jesús",  # interjection
    "Salvo",
    "Sin",
    "Van",  # verb
})

# Words tagged as common nouns in any multi-word context
ALWAYS_NOUNS = frozenset({"mañana", "paso", "monta", "deriva", "visto"})
