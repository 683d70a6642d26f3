"""
SememeSimilarity: Word Similarity from a Sememe Dictionary
===========================================================

Scores how similar two words are by comparing their decompositions into
sememes (primitive concepts) arranged in a fixed hierarchy.

Package Structure:
    sememe_similarity
        ├── hierarchy.py   - Sememe forest, ancestor chains, primitive distance
        ├── word.py        - WordRecord: one sense of one word
        ├── glossary.py    - Glossary line parser and file loader
        ├── store.py       - Write-once word -> senses store
        ├── similarity.py  - Scoring engine (primitive → list → map → sense → word)
        ├── core.py        - SememeSimilarity main class
        └── cli.py         - sememe-sim command

Scoring model:
    sim(p1, p2)     = alpha / (d(p1, p2) + alpha)        alpha = 1.6
    sense(s1, s2)   = cascaded sum over first primitive, other primitives,
                      relational primitives and relation symbols with
                      weights 0.5 / 0.2 / 0.17 / 0.13
    word(w1, w2)    = max over all sense pairs

Basic Usage:
    >>> from sememe_similarity import SememeSimilarity
    >>> ss = SememeSimilarity.from_files("whole.dat", "glossary.dat")
    >>> ss.similarity_of_words("男人", "女人")
    >>> ss.distance_of_primitives("雇用", "争斗")
    2

    # Which senses matched, and how each layer scored
    >>> print(ss.explain("地", "北京").report())

    # Batch scoring
    >>> ss.similarity_matrix(["牛", "猪", "鸡", "男人"])
    >>> ss.most_similar("牛", top_k=3)

License: MIT
Version: 0.1.0
"""

from .hierarchy import (
    PrimitiveHierarchy,
    DEFAULT_PRIMITIVE_DISTANCE,
)

from .word import WordRecord

from .glossary import (
    GlossaryParseError,
    GlossaryLoadError,
    parse_line,
    format_record,
    iter_glossary,
    load_glossary,
)

from .store import WordStore, build

from .similarity import (
    SimilarityEngine,
    SimilarityParams,
    SenseComparison,
    DEFAULT_PARAMS,
)

from .core import (
    SememeSimilarity,
    load_default,
    DEFAULT_HIERARCHY_PATH,
    DEFAULT_GLOSSARY_PATH,
)

__version__ = "0.1.0"

__all__ = [
    'PrimitiveHierarchy',
    'DEFAULT_PRIMITIVE_DISTANCE',
    'WordRecord',
    'GlossaryParseError',
    'GlossaryLoadError',
    'parse_line',
    'format_record',
    'iter_glossary',
    'load_glossary',
    'WordStore',
    'build',
    'SimilarityEngine',
    'SimilarityParams',
    'SenseComparison',
    'DEFAULT_PARAMS',
    'SememeSimilarity',
    'load_default',
    'DEFAULT_HIERARCHY_PATH',
    'DEFAULT_GLOSSARY_PATH',
]
