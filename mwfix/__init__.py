"""
mwfix: resolve the placeholder tags left in a constituency treebank after
multi-word tokens are split into separate leaves.

Built for the AnCora Spanish treebank: leaf placeholders get a part-of-speech
tag and placeholder phrases get a phrasal category, using hand-tuned rules
and statistics gathered from the treebank itself.
"""

__version__ = "1.0.0"

from mwfix.config import ResolverConfig
from mwfix.driver import ResolutionReport, collect_statistics, resolve_dummy_tags, run
from mwfix.resolver import ResolutionStats, TagResolver
from mwfix.statistics import FrequencyTable, MultiWordStatistics

__all__ = [
    'FrequencyTable',
    'MultiWordStatistics',
    'ResolutionReport',
    'ResolutionStats',
    'ResolverConfig',
    'TagResolver',
    'collect_statistics',
    'resolve_dummy_tags',
    'run',
    '__version__',
]
