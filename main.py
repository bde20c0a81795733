import sys
from ftsearch import schemas
from ftsearch.core import config
from ftsearch.services.public import ingest_corpus, retrieve_documents

queries = sys.argv[1:] or ["谢娜"]

ingestion = ingest_corpus(schemas.IngestionRequest(file_dir=config.CORPUS_DIR))
print(ingestion.message)
if not ingestion.success:
    sys.exit(1)

retrieval = retrieve_documents(schemas.RetrievalRequest(queries=queries))
for query_text, docs in zip(queries, retrieval.results):
    print(f"search {query_text}: {len(docs)} documents")
    for doc in docs:
        print(f"  [{doc.id}] {doc.text}")
