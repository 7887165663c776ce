from nltk.tree import Tree

from mwfix.statistics import FrequencyTable, MultiWordStatistics, is_preterminal


def test_argmax_prefers_highest_count():
    table = FrequencyTable()
    table.increment("banco", "np00000")
    table.increment("banco", "ncms000")
    table.increment("banco", "ncms000")
    assert table.argmax("banco") == "ncms000"


def test_argmax_tie_goes_to_first_seen():
    table = FrequencyTable()
    table.increment("rg rg", "MWADV")
    table.increment("rg rg", "MWA")
    assert table.argmax("rg rg") == "MWADV"


def test_missing_key_is_not_created_on_read():
    table = FrequencyTable()
    assert table.argmax("nada") is None
    assert table.count("nada", "rg") == 0
    assert "nada" not in table
    assert len(table) == 0


def test_unigram_tagger_skips_placeholders():
    stats = MultiWordStatistics()
    stats.collect(Tree.fromstring(
        "(sentence (sn (grup.nom (np00000 Juan))) "
        "(MW_PHRASE?_rg (MW? cerca) (sp000 de)))"
    ))

    assert stats.unigram_tagger.count("Juan", "np00000") == 1
    assert stats.unigram_tagger.count("de", "sp000") == 1
    assert "cerca" not in stats.unigram_tagger
    assert stats.n_trees == 1


def test_every_known_tag_is_counted():
    tree = Tree.fromstring(
        "(sentence (sn (da0ms0 el) (nc0s000 banco)) (sp (sp000 de) (nc0p000 datos)) (fp .))"
    )
    stats = MultiWordStatistics()
    stats.collect(tree)
    for word, tag in tree.pos():
        assert stats.unigram_tagger.count(word, tag) >= 1


def test_multiword_tables():
    stats = MultiWordStatistics()
    for _ in range(2):
        stats.collect(Tree.fromstring(
            "(sentence (MWADV (rg a) (aq0000 menudo)) (MW_PHRASE?_rg (MW? cerca) (MW? de)))"
        ))

    assert stats.preterm_label.count("rg aq0000", "MWADV") == 2
    assert stats.label_preterm.count("MWADV", "rg aq0000") == 2
    assert stats.label_term.count("MWADV", "a menudo") == 2
    assert stats.term_label.count("a menudo", "MWADV") == 2
    # Placeholders are never learned as categories
    assert "MW? MW?" not in stats.preterm_label
    assert not any(label.startswith("MW_PHRASE?") for label in stats.label_preterm)


def test_is_preterminal():
    tree = Tree.fromstring("(sn (nc0s000 banco))")
    assert is_preterminal(tree[0])
    assert not is_preterminal(tree)
    assert not is_preterminal("banco")
