import logging

from nltk.tree import Tree

from mwfix.config import ResolverConfig
from mwfix.driver import (
    ResolutionReport,
    collect_statistics,
    format_report,
    output_path_for,
    run,
)
from mwfix.resolver import ResolutionStats
from mwfix.treebank import read_trees

from .conftest import KNOWN_TREE


def test_output_path(tmp_path):
    assert output_path_for(tmp_path / "a.mrg") == tmp_path / "a.mrg.fixed"
    assert output_path_for(tmp_path / "a.mrg", ".out") == tmp_path / "a.mrg.out"


def test_collect_statistics_over_corpus(corpus_file):
    statistics = collect_statistics(read_trees(corpus_file))

    assert statistics.n_trees == 2
    assert statistics.unigram_tagger.count("banco", "nc0s000") == 2
    assert statistics.unigram_tagger.count("de", "sp000") == 1


def test_run_writes_fixed_trees(corpus_file, capsys):
    report = run(corpus_file, ResolverConfig(normalize=False))

    lines = report.output_path.read_text(encoding="utf-8").splitlines()
    assert report.output_path.name == "ancora.mrg.fixed"
    assert report.n_trees == 2
    assert lines == [
        KNOWN_TREE,
        "(sentence (grup.adv (np00000 cerca) (prep (sp000 de))) (sn (grup.nom (nc0s000 banco))))",
    ]
    assert report.stats == ResolutionStats(missing_pos=2, fixed_pos=2, missing_phrasal=1, fixed_phrasal=1)
    assert "Processed 2 trees" in capsys.readouterr().out


def test_run_normalizes_by_default(corpus_file):
    report = run(corpus_file)

    lines = report.output_path.read_text(encoding="utf-8").splitlines()
    assert all(line.startswith("(ROOT (sentence ") for line in lines)


def test_run_expands_each_tree_once(corpus_file):
    seen = []

    def expand(tree, phrases):
        seen.append((tree.label(), [phrase.label() for phrase in phrases]))
        return tree

    run(corpus_file, ResolverConfig(normalize=False), expand=expand)

    assert seen == [("sentence", []), ("sentence", ["grup.adv"])]


def test_run_keeps_groups_not_built_from_split_tokens(tmp_path):
    path = tmp_path / "flat.mrg"
    path.write_text(
        "(sentence (sn (grup.nom (nc0s000 ciencia) (da0fs0 la))))\n"
        "(sentence (MW_PHRASE?_rg (MW? cerca) (MW? de)) (grup.nom (nc0s000 ciencia) (da0fs0 la)))\n",
        encoding="utf-8",
    )

    report = run(path, ResolverConfig(normalize=False))

    lines = report.output_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "(sentence (sn (grup.nom (nc0s000 ciencia) (da0fs0 la))))"
    assert lines[1].endswith("(grup.nom (nc0s000 ciencia) (da0fs0 la)))")
    assert lines[1].startswith("(sentence (grup.adv ")


def test_run_logs_each_tree_at_debug(corpus_file, caplog):
    with caplog.at_level(logging.DEBUG, logger="mwfix.driver"):
        run(corpus_file, ResolverConfig(normalize=False))

    assert "Tree 1: 0 phrase(s) resolved" in caplog.text
    assert "Tree 2: 1 phrase(s) resolved" in caplog.text


def test_run_retains_ner(tmp_path):
    path = tmp_path / "ner.mrg"
    path.write_text("(sentence (MW_PHRASE?_np0000l (MW? Buenos) (MW? Aires)))\n", encoding="utf-8")

    report = run(path, ResolverConfig(retain_ner=True, normalize=False))

    (tree,) = list(read_trees(report.output_path))
    assert tree[0].label() == "grup.nom.lug"


def test_corpus_without_placeholders(tmp_path):
    path = tmp_path / "clean.mrg"
    path.write_text(KNOWN_TREE + "\n", encoding="utf-8")

    report = run(path, ResolverConfig(normalize=False))
    text = format_report(report)

    assert report.stats == ResolutionStats()
    assert text.count("n/a") == 2
    assert "#Unknown Word Types:" in text


def test_format_report_percentages(tmp_path):
    report = ResolutionReport(
        input_path=tmp_path / "a",
        output_path=tmp_path / "a.fixed",
        stats=ResolutionStats(missing_pos=4, fixed_pos=4, missing_phrasal=3, fixed_phrasal=2),
    )
    text = format_report(report)

    assert "100.00%" in text
    assert "66.67%" in text
    assert "Phrasal" in text


def test_statistics_are_complete_before_resolution(tmp_path):
    # The only known occurrence of "nuevo" comes after the placeholder
    path = tmp_path / "order.mrg"
    path.write_text(
        "(sentence (MW_PHRASE?_rg (MW? de) (MW? nuevo)))\n"
        "(sentence (sa (aq0000 nuevo)))\n",
        encoding="utf-8",
    )

    report = run(path, ResolverConfig(normalize=False))

    first = Tree.fromstring(report.output_path.read_text(encoding="utf-8").splitlines()[0])
    assert first[0][1].label() == "aq0000"
