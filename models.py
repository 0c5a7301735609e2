from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class QueryRequest(BaseModel):
    documents: str  # Blob URL for the PDF document
    questions: List[str]

class QueryResponse(BaseModel):
    answers: List[Optional[str]]

class QueryResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str
    answer: str
    confidence: float = Field(ge=0.0, le=1.0)
    sources: List[str]
    reasoning: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

class DispatchReport(BaseModel):
    results: List[QueryResult]
    degraded: bool = False  # True when results come from the fallback responder
    failure: Optional[str] = None
    elapsed_ms: int = 0

class AnalyzeRequest(BaseModel):
    questions: List[str]
    documents: Optional[str] = None  # Uploaded document URL, sample policy if omitted

class AnalyzeResponse(DispatchReport):
    pass
