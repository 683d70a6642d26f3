"""
hierarchy.py - Sememe Hierarchy and Primitive Distance
=======================================================

The sememe ("primitive") hierarchy is a fixed forest of concept nodes.
Every node knows its parent; a node whose parent is itself is a root.
Several independent trees (event, entity, attribute, ...) coexist.

File format (one sememe per line, whitespace separated):

    ID  ENGLISH|GLOSS  PARENT_ID  [ignored trailing columns]

    0 entity|实体 0
    1 thing|万物 0
    2 physical|物质 1

Sememes are registered under their GLOSS, which is the text the glossary
stores as a word's primitive values.

Distance:
    Walk the ancestor chain of p1 nearest-first. The first entry that also
    appears in the chain of p2 (at index j) gives distance i + j. When the
    chains share nothing, or either token is not a sememe, the default
    distance (20) is returned. Unknown tokens and genuinely unrelated
    sememes are therefore indistinguishable.

Usage:
    >>> h = PrimitiveHierarchy.from_file("whole.dat")
    >>> h.ancestor_chain("牲畜")
    array([8, 7, 6, 4, 3, 2, 1, 0])
    >>> h.distance("雇用", "争斗")
    2
"""

import warnings
from typing import Dict, Iterable, List, Optional

import numpy as np

__all__ = [
    'PrimitiveHierarchy',
    'DEFAULT_PRIMITIVE_DISTANCE',
]

# Distance between two sememes with no common ancestor
DEFAULT_PRIMITIVE_DISTANCE = 20

_EMPTY_CHAIN = np.zeros(0, dtype=np.int64)
_EMPTY_CHAIN.setflags(write=False)


class PrimitiveHierarchy:
    """
    Read-only forest of sememe nodes with precomputed ancestor chains.

    Args:
        nodes: Dict mapping node id to (gloss, parent_id)

    Raises:
        ValueError: If a parent id is unknown or a parent cycle exists
    """

    def __init__(self, nodes: Dict[int, tuple]):
        self._glosses: Dict[int, str] = {}
        self._parents: Dict[int, int] = {}
        self._ids: Dict[str, int] = {}

        for node_id, (gloss, parent_id) in nodes.items():
            self._glosses[node_id] = gloss
            self._parents[node_id] = parent_id
            if gloss in self._ids:
                warnings.warn(
                    f"Duplicate sememe '{gloss}' (ids {self._ids[gloss]}, {node_id}); "
                    f"keeping id {self._ids[gloss]}"
                )
                continue
            self._ids[gloss] = node_id

        self._chains: Dict[int, np.ndarray] = {}
        for node_id in self._glosses:
            self._chains[node_id] = self._build_chain(node_id)

    def _build_chain(self, node_id: int) -> np.ndarray:
        chain = [node_id]
        current = node_id
        # A chain longer than the node count means a cycle
        for _ in range(len(self._parents)):
            parent = self._parents[current]
            if parent == current:
                arr = np.array(chain, dtype=np.int64)
                arr.setflags(write=False)
                return arr
            if parent not in self._parents:
                raise ValueError(f"Sememe {node_id}: unknown parent id {parent}")
            chain.append(parent)
            current = parent
        raise ValueError(f"Sememe {node_id}: parent cycle, no root reachable")

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> 'PrimitiveHierarchy':
        """
        Build a hierarchy from hierarchy-file lines.

        Blank lines are ignored; malformed lines are skipped with a warning.
        """
        nodes = {}
        for lineno, line in enumerate(lines, start=1):
            parts = line.split()
            if not parts:
                continue
            try:
                node_id = int(parts[0])
                parent_id = int(parts[2])
                english, gloss = parts[1].split('|', 1)
            except (IndexError, ValueError):
                warnings.warn(f"Skipping malformed hierarchy line {lineno}: {line.rstrip()!r}")
                continue
            if node_id in nodes:
                warnings.warn(
                    f"Duplicate sememe id {node_id} on hierarchy line {lineno}; "
                    f"keeping '{nodes[node_id][0]}'"
                )
                continue
            nodes[node_id] = (gloss or english, parent_id)
        return cls(nodes)

    @classmethod
    def from_file(cls, path: str) -> 'PrimitiveHierarchy':
        """Load a hierarchy file (UTF-8)."""
        with open(path, 'r', encoding='utf-8') as f:
            return cls.from_lines(f)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._glosses)

    def __contains__(self, token) -> bool:
        return self.is_primitive(token)

    def is_primitive(self, token: Optional[str]) -> bool:
        """True iff ``token`` is a registered sememe gloss."""
        return token in self._ids

    def node_id(self, token: str) -> Optional[int]:
        return self._ids.get(token)

    def gloss(self, node_id: int) -> str:
        return self._glosses[node_id]

    def ancestor_chain(self, token: Optional[str]) -> np.ndarray:
        """
        Node ids from ``token`` up to its root, nearest-first.

        Returns an empty array when ``token`` is not a sememe.
        """
        node_id = self._ids.get(token)
        if node_id is None:
            return _EMPTY_CHAIN
        return self._chains[node_id]

    def depth(self, token: str) -> int:
        """Number of edges between ``token`` and its root (-1 if unknown)."""
        return len(self.ancestor_chain(token)) - 1

    def glosses(self, chain: np.ndarray) -> List[str]:
        return [self._glosses[int(i)] for i in chain]

    def distance(
        self,
        p1: Optional[str],
        p2: Optional[str],
        default: int = DEFAULT_PRIMITIVE_DISTANCE
    ) -> int:
        """
        Path distance between two sememes.

        The scan runs over p1's chain; the first node found anywhere in
        p2's chain decides the result. This is not a search for the
        globally smallest i + j.
        """
        chain1 = self.ancestor_chain(p1)
        chain2 = self.ancestor_chain(p2)
        if len(chain1) == 0 or len(chain2) == 0:
            return default

        shared = np.isin(chain1, chain2)
        if not shared.any():
            return default

        i = int(np.argmax(shared))
        j = int(np.flatnonzero(chain2 == chain1[i])[0])
        return i + j
