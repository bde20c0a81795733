from ftsearch import schemas
from ftsearch.utils import logger, get_tokenizer, load_stopwords
from ftsearch.services.internal import build_inverted_index
from ftsearch.repo.local import iter_corpus, store_index


def ingest_corpus(request: schemas.IngestionRequest) -> schemas.IngestionResponse:
    try:
        if not request.file_paths and not request.file_dir:
            raise ValueError("No file paths or directory provided in the request.")

        logger.info(
            f"Starting corpus ingestion into the collection '{request.collection_name}'..."
        )

        tokenizer = get_tokenizer(request.tokenizer)
        stopwords = (
            load_stopwords(request.stopwords_path)
            if request.stopwords_path
            else load_stopwords()
        )

        index = build_inverted_index(
            iter_corpus(file_paths=request.file_paths, file_dir=request.file_dir),
            tokenizer=tokenizer,
            stopwords=stopwords,
            max_documents=request.max_documents,
        )

        store_index(collection_name=request.collection_name, index=index)

        logger.info(
            f"Completed ingestion of {index.doc_count} documents for collection '{request.collection_name}'."
        )

        return schemas.IngestionResponse(
            success=True,
            message=f"Successfully indexed {index.doc_count} documents into collection '{request.collection_name}'.",
            stats=index.stats(),
        )

    except Exception as e:
        logger.error(f"Error while ingesting corpus: {e}")

        return schemas.IngestionResponse(success=False, message=str(e))
