from pathlib import Path
from typing import Iterable, Union
from ftsearch.core import config


class StopwordFilter:
    """Fixed set of terms that are never indexed."""

    def __init__(self, stopwords: Iterable[str] = ()):
        self._stopwords: frozenset[str] = frozenset(stopwords)

    def is_stopword(self, term: str) -> bool:
        return term in self._stopwords

    def __contains__(self, term: str) -> bool:
        return self.is_stopword(term)

    def __len__(self) -> int:
        return len(self._stopwords)

    def __iter__(self):
        return iter(self._stopwords)

    def __repr__(self):
        return f"StopwordFilter({len(self._stopwords)} terms)"


def load_stopwords(path: Union[str, Path] = config.STOPWORDS_PATH) -> StopwordFilter:
    with open(path, "r", encoding="utf-8") as f:
        stopwords = set(line.strip() for line in f if line.strip())
    return StopwordFilter(stopwords)
