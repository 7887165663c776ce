"""
Bottom-up resolution of multi-word placeholder tags.

Preterminals carrying :data:`~mwfix.tables.MW_TAG` get a part-of-speech tag;
constituents labelled ``MW_PHRASE?_<pos>`` get a phrasal category. Phrases
are visited after their children so that a sequence-based guess only ever
sees resolved child tags.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from nltk.tree import Tree

from . import manual_model
from .statistics import FrequencyTable, MultiWordStatistics, is_preterminal
from .tables import (
    COMMON_NOUN_POS_PREFIX,
    MW_PHRASE_DELIMITER,
    MW_PHRASE_TAG,
    MW_TAG,
    NER_CATEGORIES,
    NOMINAL_CATEGORY,
    PHRASAL_CATEGORY_MAP,
)

logger = logging.getLogger(__name__)


@dataclass
class ResolutionStats:
    """Placeholder counts for one run."""

    missing_pos: int = 0
    fixed_pos: int = 0
    missing_phrasal: int = 0
    fixed_phrasal: int = 0

    def merge(self, other: "ResolutionStats") -> None:
        self.missing_pos += other.missing_pos
        self.fixed_pos += other.fixed_pos
        self.missing_phrasal += other.missing_phrasal
        self.fixed_phrasal += other.fixed_phrasal

    @staticmethod
    def coverage(fixed: int, missing: int) -> Optional[float]:
        """Percentage of ``missing`` that was fixed, ``None`` if nothing was missing."""
        if missing == 0:
            return None
        return fixed / missing * 100

    @property
    def pos_coverage(self) -> Optional[float]:
        return self.coverage(self.fixed_pos, self.missing_pos)

    @property
    def phrasal_coverage(self) -> Optional[float]:
        return self.coverage(self.fixed_phrasal, self.missing_phrasal)


def is_placeholder(value) -> bool:
    label = value.label() if isinstance(value, Tree) else value
    return label == MW_TAG or label.startswith(MW_PHRASE_TAG)


def containing_phrase(parent: Optional[Tree]) -> Optional[str]:
    """Space-joined words under ``parent``, or ``None`` at the root."""
    if parent is None:
        return None
    return " ".join(parent.leaves())


def original_pos(phrase_value: str) -> str:
    """POS of the collapsed token encoded in a phrasal placeholder."""
    return phrase_value[phrase_value.rfind(MW_PHRASE_DELIMITER) + 1:]


def categorize_phrase(phrase_value: str, retain_ner: bool) -> Optional[str]:
    """Phrasal category from the rule table or the nominal prefix."""
    pos = original_pos(phrase_value)
    if pos in PHRASAL_CATEGORY_MAP:
        return PHRASAL_CATEGORY_MAP[pos]
    if pos.startswith(COMMON_NOUN_POS_PREFIX):
        # TODO a child tagged e.g. vmis000 may end up headed by grup.nom;
        # check child tags before trusting the collapsed token's POS.
        if not retain_ner:
            return NOMINAL_CATEGORY
        return NER_CATEGORIES.get(phrase_value[-1], NOMINAL_CATEGORY)
    return None


class TagResolver:
    """Resolves the placeholders of one tree at a time, in place."""

    def __init__(
        self,
        statistics: MultiWordStatistics,
        *,
        retain_ner: bool = False,
        stats: Optional[ResolutionStats] = None,
    ) -> None:
        self.unigram_tagger: FrequencyTable = statistics.unigram_tagger
        self.preterm_label: FrequencyTable = statistics.preterm_label
        self.retain_ner = retain_ner
        self.stats = stats if stats is not None else ResolutionStats()

    def resolve(self, tree: Tree) -> List[Tree]:
        """Fix ``tree`` in place and return the phrases given a category, in post-order."""
        resolved: List[Tree] = []
        self._traverse(tree, None, resolved)
        return resolved

    def _traverse(self, node: Tree, parent: Optional[Tree], resolved: List[Tree]) -> None:
        if is_preterminal(node):
            if node.label() == MW_TAG:
                self.stats.missing_pos += 1
                pos = self.infer_pos(node, parent)
                if pos is not None:
                    node.set_label(pos)
                    self.stats.fixed_pos += 1
            return

        for kid in node:
            if isinstance(kid, Tree):
                self._traverse(kid, node, resolved)

        # Post-order visit
        if node.label().startswith(MW_PHRASE_TAG):
            self.stats.missing_phrasal += 1
            category = self.infer_phrasal_category(node)
            if category is not None:
                node.set_label(category)
                resolved.append(node)
                self.stats.fixed_phrasal += 1

    def infer_pos(self, node: Tree, parent: Optional[Tree]) -> Optional[str]:
        """Part of speech for a preterminal created by token splitting."""
        word = node[0]
        phrase = containing_phrase(parent)

        tag = manual_model.override_tag(word, phrase)
        if tag is not None:
            return tag

        if word in self.unigram_tagger:
            return self.unigram_tagger.argmax(word)

        return manual_model.base_tag(word, phrase)

    def infer_phrasal_category(self, node: Tree) -> Optional[str]:
        """Category for a constituent heading the leaves of a split token."""
        category = categorize_phrase(node.label(), self.retain_ner)
        if category is not None:
            return category

        # Fallback: the POS sequence formed by the children
        values = [kid.label() if isinstance(kid, Tree) else kid for kid in node]
        sequence = " ".join(values)
        if any(is_placeholder(value) for value in values):
            logger.warning("Unresolved child in phrase, skipping: %s", sequence)
            return None
        if sequence in self.preterm_label:
            return self.preterm_label.argmax(sequence)

        logger.warning("No phrasal cat for: %s", sequence)
        return None
