from .doc import Document, IngestionRecord
from .ii import TermFrequency, IndexStats
from .request import IngestionRequest, RetrievalRequest
from .response import IngestionResponse, RetrievalResponse
