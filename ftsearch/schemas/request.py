from pydantic import BaseModel, Field
from typing import Optional
from ftsearch.core import config
from ftsearch.utils.tokenizer import TokenizerName


class IngestionRequest(BaseModel):
    file_paths: list[str] = Field(
        default=[], description="List of corpus files to ingest"
    )
    file_dir: str = Field(
        default="", description="Directory containing corpus files to ingest"
    )
    collection_name: str = Field(
        default=config.DEFAULT_COLLECTION, description="Name of the in-memory index"
    )
    tokenizer: TokenizerName = Field(
        default=config.TOKENIZER, description="Name of the tokenizer backend"
    )
    max_documents: int = Field(
        default=config.MAX_DOCUMENTS,
        gt=0,
        description="Documents beyond this many are silently excluded",
    )
    stopwords_path: Optional[str] = Field(
        default=None, description="Stopword list to use instead of the configured one"
    )


class RetrievalRequest(BaseModel):
    queries: list[str] = Field(..., description="The list of query texts")
    collection_name: str = Field(
        default=config.DEFAULT_COLLECTION, description="Name of the in-memory index"
    )
