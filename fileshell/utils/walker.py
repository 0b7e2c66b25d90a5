from __future__ import annotations

import os
from typing import Iterator, NamedTuple

"""Depth-first traversal of a directory subtree.

Symbolic links are yielded as plain nodes and never descended into, so a link
pointing back up the tree cannot make the walk loop. There is no other cycle
detection (bind mounts looping back on themselves are out of scope).
"""


class WalkNode(NamedTuple):
    path: str
    is_dir: bool


def walk_tree(root: str) -> Iterator[WalkNode]:
    """Yield every node under root (root included) in depth-first pre-order.

    A directory is yielded before its children and each child subtree is
    exhausted before its next sibling. Children come in the order the OS lists
    them. Listing errors are not caught: they end the traversal and propagate
    to whoever is consuming the generator.
    """
    is_dir = os.path.isdir(root) and not os.path.islink(root)
    yield WalkNode(root, is_dir)
    if is_dir:
        yield from _walk_children(root)


def _walk_children(directory: str) -> Iterator[WalkNode]:
    with os.scandir(directory) as it:
        entries = list(it)
    for entry in entries:
        child_is_dir = entry.is_dir(follow_symlinks=False)
        yield WalkNode(entry.path, child_is_dir)
        if child_is_dir:
            yield from _walk_children(entry.path)
