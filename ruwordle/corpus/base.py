from __future__ import annotations
from typing import Dict, Set, Type

from ..engine.query import WordFilter

# ---- Corpus kinds, keyed by file suffix ----
REGISTRY: Dict[str, Type["BaseCorpus"]] = {}


def register(*suffixes: str):
    """
    Decorator: @register(".txt") on a corpus class makes open_corpus() pick it
    for locations with that suffix.
    """
    def wrap(cls: Type["BaseCorpus"]) -> Type["BaseCorpus"]:
        for sfx in suffixes:
            if sfx in REGISTRY:
                raise ValueError(f"Duplicate corpus suffix: {sfx}")
            REGISTRY[sfx] = cls
        return cls
    return wrap


class BaseCorpus:
    """
    Read-only word store.

    query() returns the unordered, de-duplicated set of words passing the
    filter. Implementations raise CorpusAccessError when the store cannot be
    read; they never return partial results.
    """
    kind = "base"

    def __init__(self, location: str):
        self.location = location

    @classmethod
    def open(cls, location: str) -> "BaseCorpus":
        raise NotImplementedError("Override in subclass")

    def query(self, word_filter: WordFilter) -> Set[str]:
        raise NotImplementedError("Override in subclass")

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        self.close()
