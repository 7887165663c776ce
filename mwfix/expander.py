"""
Further structure for constituents built from split multi-word tokens.

Token splitting leaves a flat constituent such as

    (grup.adv (rg cerca) (sp000 de))

Once its category is known, function words inside it (and only inside
constituents built that way) get the intermediate
nodes the treebank uses elsewhere:

    (grup.adv (rg cerca) (prep (sp000 de)))
"""

from __future__ import annotations

from typing import Iterable, Optional

from nltk.tree import Tree

from .statistics import is_preterminal

GROUP_PREFIX = "grup."

# POS prefix -> wrapping constituent, checked in order
_WRAPPERS = (
    ("sp", "prep"),
    ("cc", "conj"),
    ("cs", "conj"),
    ("d", "spec"),
)


def _wrapper_for(tag: str) -> Optional[str]:
    for prefix, label in _WRAPPERS:
        if tag.startswith(prefix):
            return label
    return None


def _is_flat_group(node: Tree) -> bool:
    return (
        node.label().startswith(GROUP_PREFIX)
        and len(node) > 1
        and all(is_preterminal(kid) for kid in node)
    )


def expand_phrases(tree: Tree, phrases: Iterable[Tree] = ()) -> Tree:
    """Wrap function-word preterminals of the flat ``grup.*`` constituents in ``phrases``.

    ``phrases`` are the constituents built from split tokens, as returned by
    :meth:`~mwfix.resolver.TagResolver.resolve`; other constituents of ``tree``
    are left alone. Works in place.
    """
    for node in [phrase for phrase in phrases if _is_flat_group(phrase)]:
        for i, kid in enumerate(node):
            label = _wrapper_for(kid.label())
            if label is not None:
                node[i] = Tree(label, [kid])
    return tree
