from typing import Iterator, Optional
from ftsearch import schemas


class DocumentStore:
    """Holds the corpus of one indexing session.

    Ids are dense and zero-based, assigned in ingestion order. Documents are
    never removed or changed; once frozen the store rejects new documents.
    """

    def __init__(self):
        self._texts: list[str] = []
        self._frozen = False

    def add(self, text: str) -> int:
        if self._frozen:
            raise RuntimeError("Document store is frozen; the index is already built.")
        self._texts.append(text)
        return len(self._texts) - 1

    def get(self, doc_id: int) -> Optional[str]:
        if not 0 <= doc_id < len(self._texts):
            return None
        return self._texts[doc_id]

    def get_document(self, doc_id: int) -> Optional[schemas.Document]:
        text = self.get(doc_id)
        if text is None:
            return None
        return schemas.Document(id=doc_id, text=text)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._texts)

    def __iter__(self) -> Iterator[schemas.Document]:
        for doc_id, text in enumerate(self._texts):
            yield schemas.Document(id=doc_id, text=text)
