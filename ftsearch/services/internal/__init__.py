from .document_store import DocumentStore
from .inverted_index import (
    Index,
    IndexBuilder,
    build_inverted_index,
    compute_term_frequencies,
    log_term_frequency,
)
from .query import QueryEngine, query
