from typing import Optional
from pydantic import BaseModel, Field
from .doc import Document
from .ii import IndexStats


class IngestionResponse(BaseModel):
    success: bool = Field(..., description="Whether the index was built")
    message: str = Field(..., description="Detailed message about the ingestion")
    stats: Optional[IndexStats] = Field(
        default=None, description="Statistics of the built index"
    )


class RetrievalResponse(BaseModel):
    success: bool = Field(..., description="Whether every query was answered")
    message: str = Field(default="", description="Detailed message about the retrieval")
    results: list[list[Document]] = Field(
        ..., description="Matched documents per query, in discovery order"
    )
