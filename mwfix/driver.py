"""
Two-pass driver: gather statistics over a treebank, then resolve every
placeholder and write the fixed trees next to the input file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from nltk.tree import Tree
from tabulate import tabulate

from .config import ResolverConfig
from .expander import expand_phrases
from .manual_model import UNKNOWN_WORD_TYPES
from .normalizer import normalize_whole_tree
from .resolver import ResolutionStats, TagResolver
from .statistics import MultiWordStatistics
from .treebank import read_trees, write_tree

logger = logging.getLogger(__name__)

TreeTransform = Callable[[Tree], Tree]
# (tree, phrases resolved in it) -> tree
PhraseExpander = Callable[[Tree, List[Tree]], Tree]


@dataclass
class ResolutionReport:
    input_path: Path
    output_path: Path
    n_trees: int = 0
    stats: ResolutionStats = field(default_factory=ResolutionStats)
    unknown_word_types: int = UNKNOWN_WORD_TYPES


def output_path_for(tree_file: Union[str, Path], suffix: str = ".fixed") -> Path:
    tree_file = Path(tree_file)
    return tree_file.with_name(tree_file.name + suffix)


def collect_statistics(trees: Iterable[Tree], statistics: Optional[MultiWordStatistics] = None) -> MultiWordStatistics:
    """First pass: accumulate frequency tables over every tree."""
    statistics = statistics if statistics is not None else MultiWordStatistics()
    for tree in trees:
        statistics.collect(tree)
    logger.debug(
        "Collected statistics over %d trees (%d word types, %d POS sequences)",
        statistics.n_trees,
        len(statistics.unigram_tagger),
        len(statistics.preterm_label),
    )
    return statistics


def resolve_dummy_tags(
    trees: Iterable[Tree],
    handle,
    statistics: MultiWordStatistics,
    *,
    retain_ner: bool = False,
    expand: PhraseExpander = expand_phrases,
    normalize: Optional[TreeTransform] = normalize_whole_tree,
    stats: Optional[ResolutionStats] = None,
) -> int:
    """Second pass: resolve, expand, normalize and write each tree.

    Returns the number of trees written. Counts go into ``stats``.
    """
    resolver = TagResolver(statistics, retain_ner=retain_ner, stats=stats)
    n_trees = 0
    for tree in trees:
        resolved = resolver.resolve(tree)
        # Further decompose the constituents formed by token splitting
        tree = expand(tree, resolved)
        if normalize is not None:
            tree = normalize(tree)
        write_tree(handle, tree)
        n_trees += 1
        logger.debug("Tree %d: %d phrase(s) resolved", n_trees, len(resolved))
    return n_trees


def run(
    tree_file: Union[str, Path],
    config: Optional[ResolverConfig] = None,
    *,
    expand: PhraseExpander = expand_phrases,
    normalize: TreeTransform = normalize_whole_tree,
) -> ResolutionReport:
    """Resolve the placeholders of ``tree_file`` into ``<tree_file><suffix>``.

    I/O errors propagate to the caller.
    """
    config = config or ResolverConfig()
    tree_file = Path(tree_file)
    report = ResolutionReport(
        input_path=tree_file,
        output_path=output_path_for(tree_file, config.output_suffix),
    )

    statistics = collect_statistics(read_trees(tree_file))

    print("Resolving DUMMY tags")
    with report.output_path.open("w", encoding="utf-8") as handle:
        report.n_trees = resolve_dummy_tags(
            read_trees(tree_file),
            handle,
            statistics,
            retain_ner=config.retain_ner,
            expand=expand,
            normalize=normalize if config.normalize else None,
            stats=report.stats,
        )
    print(f"Processed {report.n_trees} trees")
    return report


def _format_coverage(value: Optional[float]) -> str:
    return "n/a" if value is None else f"{value:.2f}%"


def format_report(report: ResolutionReport) -> str:
    stats = report.stats
    rows = [
        ["POS", stats.missing_pos, stats.fixed_pos, _format_coverage(stats.pos_coverage)],
        ["Phrasal", stats.missing_phrasal, stats.fixed_phrasal, _format_coverage(stats.phrasal_coverage)],
    ]
    table = tabulate(rows, headers=["Placeholder", "Missing", "Fixed", "Coverage"])
    return f"#Unknown Word Types: {report.unknown_word_types}\n{table}"
