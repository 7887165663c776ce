"""
Corpus statistics used to resolve placeholders.

The tables are filled in one pass over the whole treebank and are only read
afterwards.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from nltk.tree import Tree

from .tables import MW_PHRASE_TAG, MW_PREFIX, MW_TAG


@dataclass
class FrequencyTable:
    """Two-level count table: outer key -> candidate -> count."""

    rows: Dict[str, Counter] = field(default_factory=lambda: defaultdict(Counter))

    def increment(self, key: str, candidate: str, count: int = 1) -> None:
        self.rows[key][candidate] += count

    def __contains__(self, key: object) -> bool:
        return key in self.rows

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[str]:
        return iter(self.rows)

    def row(self, key: str) -> Counter:
        # Plain lookup; do not let the defaultdict grow on reads
        return self.rows.get(key, Counter())

    def count(self, key: str, candidate: str) -> int:
        return self.row(key)[candidate]

    def argmax(self, key: str) -> Optional[str]:
        """Most frequent candidate for ``key``.

        Ties go to the candidate counted first: ``Counter.most_common`` sorts
        stably over insertion order.
        """
        row = self.rows.get(key)
        if not row:
            return None
        return row.most_common(1)[0][0]


def is_preterminal(node) -> bool:
    return isinstance(node, Tree) and len(node) == 1 and not isinstance(node[0], Tree)


def _is_multiword_label(label: str) -> bool:
    return (
        label.startswith(MW_PREFIX)
        and label != MW_TAG
        and not label.startswith(MW_PHRASE_TAG)
    )


@dataclass
class MultiWordStatistics:
    """Frequency tables collected over a treebank.

    ``unigram_tagger`` maps a word to the tags it received outside of
    multi-word tokens. ``preterm_label`` maps the POS sequence under a
    multi-word constituent to the constituent labels seen for it. The other
    three tables are the remaining directions kept for inspection.
    """

    unigram_tagger: FrequencyTable = field(default_factory=FrequencyTable)
    label_preterm: FrequencyTable = field(default_factory=FrequencyTable)
    preterm_label: FrequencyTable = field(default_factory=FrequencyTable)
    label_term: FrequencyTable = field(default_factory=FrequencyTable)
    term_label: FrequencyTable = field(default_factory=FrequencyTable)
    n_trees: int = 0

    def collect(self, tree: Tree) -> None:
        self.n_trees += 1
        self.update_tagger(tree)

        for match in tree.subtrees(lambda t: _is_multiword_label(t.label())):
            label = match.label()
            tagged = match.pos()
            preterm = " ".join(tag for _, tag in tagged)
            term = " ".join(word for word, _ in tagged)

            self.label_preterm.increment(label, preterm)
            self.preterm_label.increment(preterm, label)
            self.label_term.increment(label, term)
            self.term_label.increment(term, label)

    def update_tagger(self, tree: Tree) -> None:
        for word, tag in tree.pos():
            if tag == MW_TAG:
                continue
            self.unigram_tagger.increment(word, tag)
