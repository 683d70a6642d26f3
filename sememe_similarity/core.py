"""
core.py - SememeSimilarity Main Class
======================================

Ties the pieces together: a sememe hierarchy, a frozen word store and a
similarity engine built over both.

Loading is a single sequential phase (``from_files``). After it, the
instance only reads shared immutable data and can be queried from any
number of threads.

Usage:
    >>> from sememe_similarity import SememeSimilarity
    >>> ss = SememeSimilarity.from_files()          # packaged sample data
    >>> ss.similarity_of_words("牛", "猪")
    1.0
    >>> ss.distance_of_primitives("雇用", "争斗")
    2
    >>> ss.similarity_of_primitives("雇用", "争斗")
    0.4444...
"""

import os
from typing import List, Optional, Tuple

import numpy as np

from .glossary import load_glossary
from .hierarchy import PrimitiveHierarchy
from .similarity import SimilarityEngine, SimilarityParams, SenseComparison
from .store import WordStore

__all__ = [
    'SememeSimilarity',
    'DATA_DIR',
    'DEFAULT_HIERARCHY_PATH',
    'DEFAULT_GLOSSARY_PATH',
    'load_default',
]

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')
DEFAULT_HIERARCHY_PATH = os.path.join(DATA_DIR, 'whole.dat')
DEFAULT_GLOSSARY_PATH = os.path.join(DATA_DIR, 'glossary.dat')


class SememeSimilarity:
    """
    Word similarity from a sememe dictionary.

    Args:
        hierarchy: Sememe hierarchy
        store: Word store (frozen here if still loading)
        params: Model constants
        verbose: Print load progress
    """

    def __init__(
        self,
        hierarchy: PrimitiveHierarchy,
        store: WordStore,
        params: SimilarityParams = None,
        verbose: bool = False
    ):
        self.hierarchy = hierarchy
        self.store = store.freeze()
        self.params = params
        self.verbose = verbose
        self.engine = SimilarityEngine(hierarchy, self.store, params)

    @classmethod
    def from_files(
        cls,
        hierarchy_path: str = None,
        glossary_path: str = None,
        params: SimilarityParams = None,
        verbose: bool = False
    ) -> 'SememeSimilarity':
        """
        Load a hierarchy file and a glossary file.

        Either path defaults to the sample dictionary shipped with the
        package.

        Raises:
            GlossaryLoadError: If the glossary cannot be read
        """
        hierarchy_path = hierarchy_path or DEFAULT_HIERARCHY_PATH
        glossary_path = glossary_path or DEFAULT_GLOSSARY_PATH

        hierarchy = PrimitiveHierarchy.from_file(hierarchy_path)
        if verbose:
            print(f"Loaded {len(hierarchy)} sememes from {hierarchy_path}")

        store = load_glossary(glossary_path, verbose=verbose)
        return cls(hierarchy, store, params=params, verbose=verbose)

    def load_glossary(self, path: str) -> None:
        """
        Replace the word store with one loaded from ``path``.

        The new store is fully built before it is swapped in; queries
        running against the old engine are unaffected.
        """
        store = load_glossary(path, verbose=self.verbose)
        engine = SimilarityEngine(self.hierarchy, store, self.params)
        self.store, self.engine = store, engine

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def similarity_of_words(self, word1: str, word2: str) -> float:
        return self.engine.word_similarity(word1, word2)

    def similarity_of_primitives(self, p1: str, p2: str) -> float:
        return self.engine.primitive_similarity(p1, p2)

    def distance_of_primitives(self, p1: str, p2: str) -> int:
        return self.engine.primitive_distance(p1, p2)

    def explain(self, word1: str, word2: str) -> Optional[SenseComparison]:
        """Best sense pair of two words with its per-layer scores."""
        return self.engine.best_sense_pair(word1, word2)

    def similarity_matrix(self, words: List[str]) -> np.ndarray:
        return self.engine.similarity_matrix(words)

    def most_similar(
        self,
        word: str,
        candidates: List[str] = None,
        top_k: int = 10
    ) -> List[Tuple[str, float]]:
        return self.engine.most_similar(word, candidates, top_k)

    @property
    def vocab(self) -> List[str]:
        return self.store.words()

    def __repr__(self) -> str:
        return (f"SememeSimilarity({len(self.hierarchy)} sememes, "
                f"{len(self.store)} words, {self.store.n_senses} senses)")


_default_instance: Optional[SememeSimilarity] = None


def load_default(verbose: bool = False) -> SememeSimilarity:
    """Shared instance over the packaged sample dictionary (built once)."""
    global _default_instance
    if _default_instance is None:
        _default_instance = SememeSimilarity.from_files(verbose=verbose)
    return _default_instance
