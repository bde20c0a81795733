from .ingest import ingest_corpus
from .retrieve import retrieve_documents
