from typing import Optional
from ftsearch import schemas
from ftsearch.utils import Tokenizer
from .inverted_index import Index


class QueryEngine:
    """OR-retrieval over an Index: union of postings, first-seen order, no ranking."""

    def __init__(self, index: Index, tokenizer: Optional[Tokenizer] = None):
        if tokenizer is not None and tokenizer.identity != index.tokenizer.identity:
            raise ValueError(
                f"Query tokenizer {tokenizer.identity} does not match the index "
                f"tokenizer {index.tokenizer.identity}."
            )
        self.index = index
        self.tokenizer = tokenizer or index.tokenizer

    def search_ids(self, query_text: str) -> list[int]:
        seen: set[int] = set()
        doc_ids: list[int] = []

        for term in self.tokenizer.tokenize(query_text):
            if self.index.stopwords.is_stopword(term):
                continue
            for doc_id in self.index.postings(term):
                if doc_id in seen:
                    continue
                seen.add(doc_id)
                doc_ids.append(doc_id)

        return doc_ids

    def search(self, query_text: str) -> list[schemas.Document]:
        results: list[schemas.Document] = []
        for doc_id in self.search_ids(query_text):
            doc = self.index.store.get_document(doc_id)
            if doc is not None:
                results.append(doc)
        return results


def query(index: Index, query_text: str) -> list[schemas.Document]:
    return QueryEngine(index).search(query_text)
