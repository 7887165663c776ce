"""
Reading and writing bracketed constituency trees.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Iterator, TextIO, Union

from nltk.tree import Tree


class TreebankFormatError(ValueError):
    """Raised when the input holds unbalanced brackets."""


def _parse(text: str, line_num: int) -> Tree:
    try:
        return Tree.fromstring(text)
    except ValueError as exc:
        raise TreebankFormatError(f"Bad tree ending on line {line_num}: {exc}") from exc


def iter_trees(handle: Iterable[str]) -> Iterator[Tree]:
    """Yield trees from a stream of bracketed trees.

    A tree may span several lines and several trees may share a line; a tree
    is complete once its brackets balance.
    """
    buffer: list[str] = []
    depth = 0
    for line_num, line in enumerate(handle, 1):
        start = 0
        for pos, char in enumerate(line):
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
                if depth < 0:
                    raise TreebankFormatError(f"Unexpected ')' on line {line_num}")
                if depth == 0:
                    buffer.append(line[start:pos + 1])
                    yield _parse(" ".join(buffer), line_num)
                    buffer = []
                    start = pos + 1
        rest = line[start:].strip()
        if rest:
            if depth == 0:
                raise TreebankFormatError(f"Text outside of a tree on line {line_num}: {rest!r}")
            buffer.append(rest)
    if depth != 0 or buffer:
        raise TreebankFormatError("Unbalanced brackets at end of input")


def read_trees(path: Union[str, Path]) -> Iterator[Tree]:
    with Path(path).open("r", encoding="utf-8") as handle:
        yield from iter_trees(handle)


def tree_to_line(tree: Tree) -> str:
    """Single-line bracketed form of ``tree``."""
    return tree.pformat(margin=sys.maxsize)


def write_tree(handle: TextIO, tree: Tree) -> None:
    handle.write(tree_to_line(tree))
    handle.write("\n")
