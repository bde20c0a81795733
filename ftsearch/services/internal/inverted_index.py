from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from itertools import islice
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional, Union
from ftsearch import schemas
from ftsearch.core import config
from ftsearch.utils import (
    logger,
    Tokenizer,
    StopwordFilter,
    get_tokenizer,
    load_stopwords,
)
from .document_store import DocumentStore

Record = Union[str, schemas.IngestionRecord]
TermFrequencyObserver = Callable[[schemas.TermFrequency], None]


def log_term_frequency(entry: schemas.TermFrequency) -> None:
    logger.debug(
        f"{entry.doc_id} word {entry.term} tf {entry.tf}",
        extra={"term_frequency": True},
    )


def compute_term_frequencies(
    doc_id: int, tokens: list[str]
) -> list[schemas.TermFrequency]:
    """Returns tf = count / length for every distinct term, in first-seen order."""
    length = len(tokens)
    return [
        schemas.TermFrequency(
            doc_id=doc_id, term=term, count=count, length=length, tf=count / length
        )
        for term, count in Counter(tokens).items()
    ]


class Index:
    """Immutable inverted index: term -> ordered document ids, plus the corpus."""

    def __init__(
        self,
        postings: dict[str, list[int]],
        store: DocumentStore,
        tokenizer: Tokenizer,
        stopwords: StopwordFilter,
    ):
        store.freeze()
        self._postings: Mapping[str, tuple[int, ...]] = MappingProxyType(
            {term: tuple(doc_ids) for term, doc_ids in postings.items()}
        )
        self._store = store
        self._tokenizer = tokenizer
        self._stopwords = stopwords

    @property
    def store(self) -> DocumentStore:
        return self._store

    @property
    def tokenizer(self) -> Tokenizer:
        return self._tokenizer

    @property
    def stopwords(self) -> StopwordFilter:
        return self._stopwords

    @property
    def postings_map(self) -> Mapping[str, tuple[int, ...]]:
        return self._postings

    def postings(self, term: str) -> tuple[int, ...]:
        return self._postings.get(term, ())

    @property
    def terms(self) -> list[str]:
        return list(self._postings)

    @property
    def doc_count(self) -> int:
        return len(self.store)

    @property
    def vocab_size(self) -> int:
        return len(self._postings)

    def stats(self) -> schemas.IndexStats:
        return schemas.IndexStats(
            doc_count=self.doc_count,
            vocab_size=self.vocab_size,
            tokenizer=self.tokenizer.identity,
        )

    def __contains__(self, term: str) -> bool:
        return term in self._postings

    def __repr__(self):
        return (
            f"Index(docs={self.doc_count}, terms={self.vocab_size}, "
            f"tokenizer={self.tokenizer.identity!r})"
        )


class IndexBuilder:
    """Accumulates postings over one session and is consumed by build()."""

    def __init__(
        self,
        tokenizer: Optional[Tokenizer] = None,
        stopwords: Optional[StopwordFilter] = None,
        max_documents: int = config.MAX_DOCUMENTS,
        tf_observer: Optional[TermFrequencyObserver] = log_term_frequency,
        workers: int = config.INDEX_WORKERS,
    ):
        if not max_documents > 0:
            raise ValueError("max_documents must be a positive integer.")
        if not workers > 0:
            raise ValueError("workers must be a positive integer.")

        self.tokenizer = tokenizer or get_tokenizer()
        self.stopwords = stopwords if stopwords is not None else load_stopwords()
        self.max_documents = max_documents
        self.tf_observer = tf_observer
        self.workers = workers

        self.store = DocumentStore()
        self._postings: dict[str, list[int]] = {}
        self._built = False

    @property
    def capacity_reached(self) -> bool:
        return len(self.store) >= self.max_documents

    def add(self, text: str) -> Optional[int]:
        """Indexes one document; returns its id, or None once the cap is reached."""
        self._check_open()
        if self.capacity_reached:
            return None

        doc_id = self.store.add(text)
        self._index_tokens(doc_id, self.tokenizer.tokenize(text))
        return doc_id

    def add_all(self, records: Iterable[Record]) -> int:
        """Indexes records in order and stops pulling from the source at the cap."""
        self._check_open()
        records = iter(records)
        remaining = self.max_documents - len(self.store)
        texts = (_text_of(record) for record in islice(records, max(remaining, 0)))

        if self.workers > 1:
            added = self._add_parallel(texts)
        else:
            added = 0
            for text in texts:
                self.add(text)
                added += 1

        if self.capacity_reached:
            logger.info(
                f"Reached the limit of {self.max_documents} documents; "
                "later records are not indexed."
            )
        return added

    def _add_parallel(self, texts: Iterable[str]) -> int:
        # ids are assigned before tokenizing; merge runs in id order
        pending: list[tuple[int, str]] = [(self.store.add(text), text) for text in texts]
        if not pending:
            return 0

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            tokenized = executor.map(self.tokenizer.tokenize, [t for _, t in pending])
            for (doc_id, _), tokens in zip(pending, tokenized):
                self._index_tokens(doc_id, tokens)

        return len(pending)

    def _index_tokens(self, doc_id: int, tokens: list[str]) -> None:
        # tf is measured and reported only; postings never depend on it
        frequencies = compute_term_frequencies(doc_id, tokens)
        if self.tf_observer is not None:
            for entry in frequencies:
                self.tf_observer(entry)

        for term in tokens:
            if self.stopwords.is_stopword(term):
                continue
            doc_ids = self._postings.setdefault(term, [])
            # documents arrive in id order, so a repeat can only be the tail
            if doc_ids and doc_ids[-1] == doc_id:
                continue
            doc_ids.append(doc_id)

    def build(self) -> Index:
        self._check_open()
        self._built = True
        index = Index(self._postings, self.store, self.tokenizer, self.stopwords)
        logger.info(
            f"Built inverted index over {index.doc_count} documents "
            f"with vocab size: {index.vocab_size}"
        )
        return index

    def _check_open(self) -> None:
        if self._built:
            raise RuntimeError("Index builder was already consumed by build().")


def _text_of(record: Record) -> str:
    if isinstance(record, schemas.IngestionRecord):
        return record.text
    return record


def build_inverted_index(
    records: Iterable[Record],
    tokenizer: Optional[Tokenizer] = None,
    stopwords: Optional[StopwordFilter] = None,
    max_documents: int = config.MAX_DOCUMENTS,
    tf_observer: Optional[TermFrequencyObserver] = log_term_frequency,
    workers: int = config.INDEX_WORKERS,
) -> Index:
    builder = IndexBuilder(
        tokenizer=tokenizer,
        stopwords=stopwords,
        max_documents=max_documents,
        tf_observer=tf_observer,
        workers=workers,
    )
    builder.add_all(records)
    return builder.build()
