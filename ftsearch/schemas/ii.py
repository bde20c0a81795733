from pydantic import BaseModel, ConfigDict, Field


class TermFrequency(BaseModel):
    model_config = ConfigDict(frozen=True)

    doc_id: int = Field(..., description="Document the term occurs in")
    term: str = Field(..., description="The term")
    count: int = Field(..., description="Occurrences of the term in the document")
    length: int = Field(..., description="Total term occurrences in the document")
    tf: float = Field(..., ge=0.0, le=1.0, description="count / length")


class IndexStats(BaseModel):
    doc_count: int = Field(..., description="Number of indexed documents")
    vocab_size: int = Field(..., description="Number of distinct indexed terms")
    tokenizer: str = Field(..., description="Identity of the tokenizer used")
