"""
store.py - Write-Once Word Store
=================================

Maps a surface word to the senses registered for it, in load order.

The store has two phases. While loading, ``insert`` appends records.
``freeze`` ends loading: the sense lists become tuples, further inserts
fail, and lookups are allowed. A frozen store is never mutated again, so
any number of threads may query it without locking.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from .word import WordRecord

__all__ = ['WordStore', 'build']


class WordStore:
    """Surface word -> ordered senses."""

    def __init__(self):
        self._senses: Dict[str, List[WordRecord]] = {}
        self._frozen = False
        self._n_senses = 0

    def insert(self, record: WordRecord) -> None:
        if self._frozen:
            raise RuntimeError("WordStore is frozen; cannot insert after load")
        self._senses.setdefault(record.word, []).append(record)
        self._n_senses += 1

    def freeze(self) -> 'WordStore':
        if not self._frozen:
            self._senses = {w: tuple(s) for w, s in self._senses.items()}
            self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def n_senses(self) -> int:
        return self._n_senses

    def lookup(self, word: str) -> Optional[Tuple[WordRecord, ...]]:
        """
        Senses of ``word`` in load order, or None if it is not in the store.

        Raises:
            RuntimeError: If the store has not been frozen yet
        """
        if not self._frozen:
            raise RuntimeError("WordStore queried before load completed (call freeze())")
        return self._senses.get(word)

    def words(self) -> List[str]:
        return list(self._senses)

    def __contains__(self, word) -> bool:
        return word in self._senses

    def __len__(self) -> int:
        return len(self._senses)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "loading"
        return f"WordStore({len(self)} words, {self._n_senses} senses, {state})"


def build(records: Iterable[WordRecord]) -> WordStore:
    """Insert ``records`` into a new store and freeze it."""
    store = WordStore()
    for record in records:
        store.insert(record)
    return store.freeze()
