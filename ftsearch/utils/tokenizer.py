from importlib.metadata import version, PackageNotFoundError
from typing import Callable, Literal
from ftsearch.core import config

TokenizerName = Literal["whitespace", "jieba", "nltk", "underthesea"]


class Tokenizer:
    """A named, versioned segmentation function.

    The same instance (or one with the same identity) must be used at index
    time and at query time, otherwise postings lookups silently miss.
    """

    def __init__(self, name: str, version: str, segment: Callable[[str], list[str]]):
        self.name = name
        self.version = version
        self._segment = segment

    @property
    def identity(self) -> str:
        return f"{self.name}@{self.version}"

    def tokenize(self, text: str) -> list[str]:
        if not text:
            return []
        return list(self._segment(text))

    __call__ = tokenize

    def __eq__(self, other):
        if not isinstance(other, Tokenizer):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self):
        return hash(self.identity)

    def __repr__(self):
        return f"Tokenizer({self.identity!r})"


def _dist_version(dist: str) -> str:
    try:
        return version(dist)
    except PackageNotFoundError:
        return "unknown"


def _whitespace() -> Tokenizer:
    return Tokenizer("whitespace", "1", str.split)


def _jieba() -> Tokenizer:
    import logging
    import jieba

    jieba.setLogLevel(logging.WARNING)
    _jieba_tokenizer = jieba.Tokenizer()

    def segment(text: str) -> list[str]:
        # accurate mode without HMM new-word discovery
        return [
            word for word in _jieba_tokenizer.cut(text, HMM=False) if word.strip()
        ]

    return Tokenizer("jieba", _dist_version("jieba"), segment)


def _nltk() -> Tokenizer:
    import nltk

    try:
        nltk.data.find("tokenizers/punkt_tab")
    except LookupError:
        nltk.download("punkt_tab")

    def segment(text: str) -> list[str]:
        return nltk.word_tokenize(text.lower())

    return Tokenizer("nltk", _dist_version("nltk"), segment)


def _underthesea() -> Tokenizer:
    from underthesea import word_tokenize

    def segment(text: str) -> list[str]:
        return word_tokenize(text.lower())

    return Tokenizer("underthesea", _dist_version("underthesea"), segment)


_factories: dict[str, Callable[[], Tokenizer]] = {
    "whitespace": _whitespace,
    "jieba": _jieba,
    "nltk": _nltk,
    "underthesea": _underthesea,
}

_tokenizer_cache: dict[str, Tokenizer] = {}


def get_tokenizer(name: TokenizerName = config.TOKENIZER) -> Tokenizer:
    if name in _tokenizer_cache:
        return _tokenizer_cache[name]

    if name not in _factories:
        raise ValueError(
            f"Unknown tokenizer: {name}. Available: {', '.join(sorted(_factories))}"
        )

    tokenizer = _factories[name]()
    _tokenizer_cache[name] = tokenizer
    return tokenizer


def tokenize(texts: list[str], name: TokenizerName = config.TOKENIZER) -> list[list[str]]:
    tokenizer = get_tokenizer(name)
    return [tokenizer.tokenize(text) for text in texts]
