from ftsearch import schemas
from ftsearch.utils import logger
from ftsearch.services.internal import QueryEngine
from ftsearch.repo.local import load_index


def retrieve_documents(request: schemas.RetrievalRequest) -> schemas.RetrievalResponse:
    try:
        if not request.queries:
            raise ValueError("No query text provided in the request.")

        index = load_index(request.collection_name)
        engine = QueryEngine(index)

        logger.info(
            f"Starting document retrieval for the {len(request.queries)} input queries..."
        )

        results = [engine.search(query_text) for query_text in request.queries]

        logger.info(
            f"Retrieved {sum(len(r) for r in results)} documents from collection '{request.collection_name}'."
        )

        return schemas.RetrievalResponse(success=True, results=results)

    except Exception as e:
        logger.error(f"Error in retrieve_documents: {e}")
        return schemas.RetrievalResponse(success=False, message=str(e), results=[])
