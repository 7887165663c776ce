"""
Whole-tree clean-up applied to resolved trees before they are written out.
"""

from __future__ import annotations

from nltk.tree import Tree

ROOT_LABEL = "ROOT"


def _prune_empty(node: Tree) -> None:
    for i in reversed(range(len(node))):
        kid = node[i]
        if not isinstance(kid, Tree):
            continue
        _prune_empty(kid)
        if len(kid) == 0:
            del node[i]


def _collapse_unary(node: Tree) -> Tree:
    # (X (X ...)) -> (X ...)
    while len(node) == 1 and isinstance(node[0], Tree) and node[0].label() == node.label():
        node = node[0]
    for i, kid in enumerate(node):
        if isinstance(kid, Tree):
            node[i] = _collapse_unary(kid)
    return node


def normalize_whole_tree(tree: Tree) -> Tree:
    """Drop empty constituents, collapse same-label unary chains and root the tree at ROOT.

    A nameless outer bracket, as in ``( (sentence ...))``, becomes the ROOT node.
    """
    _prune_empty(tree)
    tree = _collapse_unary(tree)
    if tree.label() == "":
        tree.set_label(ROOT_LABEL)
    elif tree.label() != ROOT_LABEL:
        tree = Tree(ROOT_LABEL, [tree])
    return tree
