"""
word.py - One Sense of One Dictionary Word
===========================================

A ``WordRecord`` is the parsed form of a single glossary line. Content
words carry a sememe decomposition:

    first_primitive             - the primary sememe
    other_primitives            - secondary sememes / literal values
    relational_primitives       - role key ("patient", "host", ...) -> values
    relation_symbol_primitives  - relation symbol ("#", "*", ...) -> values

Function words instead carry ``structural_words`` and nothing else.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class WordRecord:
    """
    A single sense of a word.

    Attributes:
        word: Surface form users query by (shared across senses)
        pos: Part-of-speech tag as given in the dictionary
        first_primitive: Primary sememe (content words only)
        other_primitives: Secondary sememes in dictionary order
        relational_primitives: Role key -> ordered values
        relation_symbol_primitives: Relation symbol -> ordered values
        structural_words: Literal tokens of a function word
    """
    word: str
    pos: str = ""
    first_primitive: Optional[str] = None
    other_primitives: List[str] = field(default_factory=list)
    relational_primitives: Dict[str, List[str]] = field(default_factory=dict)
    relation_symbol_primitives: Dict[str, List[str]] = field(default_factory=dict)
    structural_words: List[str] = field(default_factory=list)

    @property
    def is_structural(self) -> bool:
        return bool(self.structural_words)

    @property
    def has_content(self) -> bool:
        return bool(
            self.first_primitive is not None
            or self.other_primitives
            or self.relational_primitives
            or self.relation_symbol_primitives
        )

    def add_other_primitive(self, value: str) -> None:
        self.other_primitives.append(value)

    def add_relational_primitive(self, key: str, value: str) -> None:
        self.relational_primitives.setdefault(key, []).append(value)

    def add_relation_symbol_primitive(self, symbol: str, value: str) -> None:
        self.relation_symbol_primitives.setdefault(symbol, []).append(value)

    def add_structural_word(self, value: str) -> None:
        self.structural_words.append(value)

    def validate(self) -> None:
        """Raise ValueError if the record is both structural and content."""
        if self.is_structural and self.has_content:
            raise ValueError(
                f"'{self.word}' mixes structural words {self.structural_words} "
                f"with content sememes"
            )

    def summary(self) -> str:
        if self.is_structural:
            return f"{self.word} [{self.pos}] structural={self.structural_words}"
        parts = [f"{self.word} [{self.pos}] first={self.first_primitive}"]
        if self.other_primitives:
            parts.append(f"other={self.other_primitives}")
        if self.relational_primitives:
            parts.append(f"relational={self.relational_primitives}")
        if self.relation_symbol_primitives:
            parts.append(f"symbol={self.relation_symbol_primitives}")
        return " ".join(parts)
