"""
similarity.py - Sememe-Based Word Similarity
=============================================

Scores the semantic similarity of two words from their sememe
decompositions, bottom-up:

    primitive distance   d(p1, p2)          path length in the hierarchy
    primitive similarity alpha / (d + alpha)
    token similarity     sememe/sememe, literal/literal, or mixed
    list similarity      greedy one-to-one matching of two token lists
    map similarity       list similarity per shared key, plus a penalty
                         for keys present on one side only
    sense similarity     cascaded weighted sum of four layers
    word similarity      best pair over all senses of both words

Sense similarity for content words:

    product = sim1                      first primitive
    total   = beta1 * product
    product *= sim2 ; total += beta2 * product    other primitives
    product *= sim3 ; total += beta3 * product    relational primitives
    product *= sim4 ; total += beta4 * product    relation symbols

A later layer only contributes as much as the earlier layers agree.
Function words are compared by their structural word lists only, and
never match content words (score 0).

The engine holds no mutable state. Once the hierarchy and the store are
built, every method may be called from any number of threads.

Usage:
    >>> engine = SimilarityEngine(hierarchy, store)
    >>> engine.word_similarity("牛", "猪")
    1.0
    >>> print(engine.best_sense_pair("男人", "孩子").report())
"""

import warnings
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .hierarchy import PrimitiveHierarchy, DEFAULT_PRIMITIVE_DISTANCE
from .store import WordStore
from .word import WordRecord

__all__ = [
    'SimilarityParams',
    'DEFAULT_PARAMS',
    'SenseComparison',
    'SimilarityEngine',
]


# =============================================================================
# Parameters
# =============================================================================

@dataclass(frozen=True)
class SimilarityParams:
    """
    Tunable constants of the scoring model.

    Attributes:
        alpha: Distance at which primitive similarity drops to 0.5
        beta1..beta4: Layer weights (first, other, relational, symbol)
        gamma: Similarity between a sememe and a literal word
        delta: Similarity between any value and a missing counterpart
        default_distance: Distance of sememes with no common ancestor
    """
    alpha: float = 1.6
    beta1: float = 0.5
    beta2: float = 0.2
    beta3: float = 0.17
    beta4: float = 0.13
    gamma: float = 0.2
    delta: float = 0.2
    default_distance: int = DEFAULT_PRIMITIVE_DISTANCE

    def __post_init__(self):
        if self.alpha <= 0:
            raise ValueError(f"alpha must be positive, got {self.alpha}")
        total = self.beta1 + self.beta2 + self.beta3 + self.beta4
        if abs(total - 1.0) > 1e-9:
            warnings.warn(f"Layer weights sum to {total:.4f}; scores may leave [0, 1]")


DEFAULT_PARAMS = SimilarityParams()


# =============================================================================
# Results
# =============================================================================

@dataclass
class SenseComparison:
    """Breakdown of one sense-pair score."""
    sense1: WordRecord
    sense2: WordRecord
    total: float
    first: Optional[float] = None       # None unless both are content words
    other: Optional[float] = None
    relational: Optional[float] = None
    symbol: Optional[float] = None

    @property
    def kind(self) -> str:
        if self.sense1.is_structural != self.sense2.is_structural:
            return "mismatch"
        return "structural" if self.sense1.is_structural else "content"

    def report(self) -> str:
        lines = [
            f"{self.sense1.word} ↔ {self.sense2.word}: {self.total:.4f} ({self.kind})",
            f"  {self.sense1.summary()}",
            f"  {self.sense2.summary()}",
        ]
        if self.kind == "content":
            lines.append(
                f"  first={self.first:.4f} other={self.other:.4f} "
                f"relational={self.relational:.4f} symbol={self.symbol:.4f}"
            )
        return "\n".join(lines)


# =============================================================================
# Engine
# =============================================================================

class SimilarityEngine:
    """
    Word similarity over a sememe hierarchy and a frozen word store.

    Args:
        hierarchy: Sememe hierarchy
        store: Frozen word store
        params: Model constants (DEFAULT_PARAMS when None)
    """

    def __init__(
        self,
        hierarchy: PrimitiveHierarchy,
        store: WordStore,
        params: SimilarityParams = None
    ):
        self.hierarchy = hierarchy
        self.store = store
        self.params = params or DEFAULT_PARAMS

    # -------------------------------------------------------------------------
    # Primitives and tokens
    # -------------------------------------------------------------------------

    def primitive_distance(self, p1: Optional[str], p2: Optional[str]) -> int:
        return self.hierarchy.distance(p1, p2, default=self.params.default_distance)

    def primitive_similarity(self, p1: Optional[str], p2: Optional[str]) -> float:
        alpha = self.params.alpha
        return alpha / (self.primitive_distance(p1, p2) + alpha)

    def token_similarity(self, t1: str, t2: str) -> float:
        """
        Compare two values that may be sememes or literal words.

        Two sememes use primitive similarity; two literals score 1 when
        equal and 0 otherwise; a sememe against a literal scores gamma.
        """
        is_primitive1 = self.hierarchy.is_primitive(t1)
        is_primitive2 = self.hierarchy.is_primitive(t2)
        if is_primitive1 and is_primitive2:
            return self.primitive_similarity(t1, t2)
        if not is_primitive1 and not is_primitive2:
            return 1.0 if t1 == t2 else 0.0
        return self.params.gamma

    # -------------------------------------------------------------------------
    # Collections
    # -------------------------------------------------------------------------

    def list_similarity(self, list1: Sequence[str], list2: Sequence[str]) -> float:
        """
        Greedy one-to-one matching of two token lists.

        Each round scans the remaining pairs row-major and takes the first
        pair with the highest score; both tokens are then removed. Surplus
        tokens of the longer list score delta each. This is not an optimal
        assignment, and ties go to the earliest pair in scan order.

        The inputs are copied, never modified.
        """
        list1 = list(list1)
        list2 = list(list2)
        if not list1 and not list2:
            return 1.0

        big = max(len(list1), len(list2))
        n_pairs = min(len(list1), len(list2))

        total = 0.0
        for _ in range(n_pairs):
            best = -1.0
            best_i = best_j = 0
            for i, t1 in enumerate(list1):
                for j, t2 in enumerate(list2):
                    sim = self.token_similarity(t1, t2)
                    if sim > best:
                        best, best_i, best_j = sim, i, j
            total += best
            del list1[best_i]
            del list2[best_j]

        return (total + self.params.delta * (big - n_pairs)) / big

    def map_similarity(
        self,
        map1: Dict[str, Sequence[str]],
        map2: Dict[str, Sequence[str]]
    ) -> float:
        """
        Compare two key -> values maps.

        Shared keys contribute the list similarity of their values (in
        map1's key order); each key present on one side only contributes
        delta.
        """
        if not map1 and not map2:
            return 1.0

        total = len(map1) + len(map2)
        sim = 0.0
        count = 0
        for key, values in map1.items():
            if key in map2:
                sim += self.list_similarity(values, map2[key])
                count += 1

        denominator = total - count
        if denominator == 0:
            return sim / count
        return (sim + self.params.delta * (total - 2 * count)) / denominator

    # -------------------------------------------------------------------------
    # Senses and words
    # -------------------------------------------------------------------------

    def _layer_scores(self, s1: WordRecord, s2: WordRecord) -> Tuple[float, float, float, float]:
        return (
            self.primitive_similarity(s1.first_primitive, s2.first_primitive),
            self.list_similarity(s1.other_primitives, s2.other_primitives),
            self.map_similarity(s1.relational_primitives, s2.relational_primitives),
            self.map_similarity(s1.relation_symbol_primitives, s2.relation_symbol_primitives),
        )

    def _cascade(self, scores: Tuple[float, float, float, float]) -> float:
        p = self.params
        product = scores[0]
        total = p.beta1 * product
        product *= scores[1]
        total += p.beta2 * product
        product *= scores[2]
        total += p.beta3 * product
        product *= scores[3]
        total += p.beta4 * product
        return total

    def sense_similarity(self, s1: WordRecord, s2: WordRecord) -> float:
        if s1.is_structural != s2.is_structural:
            return 0.0
        if s1.is_structural:
            return self.list_similarity(s1.structural_words, s2.structural_words)
        return self._cascade(self._layer_scores(s1, s2))

    def compare_senses(self, s1: WordRecord, s2: WordRecord) -> SenseComparison:
        """Sense similarity with the per-layer scores kept."""
        if s1.is_structural or s2.is_structural:
            return SenseComparison(s1, s2, self.sense_similarity(s1, s2))
        scores = self._layer_scores(s1, s2)
        return SenseComparison(s1, s2, self._cascade(scores), *scores)

    def _senses_or_warn(self, word1: str, word2: str):
        senses1 = self.store.lookup(word1)
        senses2 = self.store.lookup(word2)
        if senses1 is None or senses2 is None:
            missing = [w for w, s in ((word1, senses1), (word2, senses2)) if s is None]
            warnings.warn(f"Word(s) not in dictionary: {missing}")
            return None
        return senses1, senses2

    def _best_score(self, senses1, senses2) -> float:
        best = 0.0
        for s1 in senses1:
            for s2 in senses2:
                sim = self.sense_similarity(s1, s2)
                if sim > best:
                    best = sim
        return best

    def word_similarity(self, word1: str, word2: str) -> float:
        """
        Highest sense similarity over all sense pairs of two words.

        Returns 0.0 (with a warning) if either word is not in the store.
        """
        found = self._senses_or_warn(word1, word2)
        if found is None:
            return 0.0
        return self._best_score(*found)

    def best_sense_pair(self, word1: str, word2: str) -> Optional[SenseComparison]:
        """The sense pair behind ``word_similarity`` (first maximum wins)."""
        found = self._senses_or_warn(word1, word2)
        if found is None:
            return None
        best = None
        for s1 in found[0]:
            for s2 in found[1]:
                comparison = self.compare_senses(s1, s2)
                if best is None or comparison.total > best.total:
                    best = comparison
        return best

    # -------------------------------------------------------------------------
    # Batch scoring
    # -------------------------------------------------------------------------

    def similarity_matrix(self, words: List[str]) -> np.ndarray:
        """
        Pairwise word similarities.

        Entry [i, j] is ``word_similarity(words[i], words[j])``; rows and
        columns of words missing from the store are zero.
        """
        missing = {w for w in words if w not in self.store}
        if missing:
            warnings.warn(f"Word(s) not in dictionary: {sorted(missing)}")

        n = len(words)
        matrix = np.zeros((n, n))
        for i, w1 in enumerate(words):
            if w1 in missing:
                continue
            senses1 = self.store.lookup(w1)
            for j, w2 in enumerate(words):
                if w2 in missing:
                    continue
                matrix[i, j] = self._best_score(senses1, self.store.lookup(w2))
        return matrix

    def most_similar(
        self,
        word: str,
        candidates: List[str] = None,
        top_k: int = 10
    ) -> List[Tuple[str, float]]:
        """
        Rank candidate words by similarity to ``word``.

        Args:
            word: Query word
            candidates: Words to rank (every other stored word when None)
            top_k: Number of results

        Returns:
            (word, similarity) pairs, best first; ties keep candidate order
        """
        senses = self.store.lookup(word)
        if senses is None:
            warnings.warn(f"Word '{word}' not in dictionary")
            return []
        if candidates is None:
            candidates = [w for w in self.store.words() if w != word]

        scored = []
        for candidate in candidates:
            other = self.store.lookup(candidate)
            if other is None:
                continue
            scored.append((candidate, self._best_score(senses, other)))
        scored.sort(key=lambda x: -x[1])
        return scored[:top_k]
