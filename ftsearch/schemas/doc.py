from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Document(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, description="Sequential identifier assigned at ingestion")
    text: str = Field(..., description="The text content of the document")


class IngestionRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="The text to index")
    hint: Optional[str] = Field(
        default=None,
        description="Identifier supplied by the source, never used as a document id",
    )
