from pathlib import Path

import pytest
from nltk.tree import Tree

from mwfix.statistics import MultiWordStatistics

KNOWN_TREE = (
    "(sentence (sn (grup.nom (nc0s000 banco))) "
    "(sp (prep (sp000 de)) (sn (grup.nom (nc0p000 datos)))))"
)
PLACEHOLDER_TREE = (
    "(sentence (MW_PHRASE?_rg (MW? cerca) (MW? de)) "
    "(sn (grup.nom (nc0s000 banco))))"
)


@pytest.fixture
def statistics() -> MultiWordStatistics:
    stats = MultiWordStatistics()
    stats.collect(Tree.fromstring(KNOWN_TREE))
    return stats


@pytest.fixture
def corpus_file(tmp_path: Path) -> Path:
    path = tmp_path / "ancora.mrg"
    path.write_text(KNOWN_TREE + "\n" + PLACEHOLDER_TREE + "\n", encoding="utf-8")
    return path
