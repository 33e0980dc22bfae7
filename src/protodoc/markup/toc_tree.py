"""Nest flat table-of-contents entries by dotted-number depth."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from protodoc.spec.models import TOCEntry


@dataclass(slots=True)
class TOCNode:
    entry: TOCEntry
    children: list[TOCNode] = field(default_factory=list)

    @property
    def level(self) -> int:
        return self.entry.depth


def build_toc_tree(entries: Iterable[TOCEntry]) -> list[TOCNode]:
    """Attach each entry to the nearest open ancestor one level shallower.

    Prefixes are not validated, so an entry that skips levels hangs off the
    deepest node that is still open above its own depth.
    """

    roots: list[TOCNode] = []
    # open ancestors, shallowest first
    stack: list[TOCNode] = []
    for entry in entries:
        node = TOCNode(entry=entry)
        del stack[entry.depth - 1 :]
        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)
        stack.append(node)
    return roots
