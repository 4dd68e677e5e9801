from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List


class SuggestRequest(BaseModel):
    """Describe a design problem; get matching patterns back"""
    context: str
    max_results: int = Field(default=5, ge=1, le=22)


class ValidateRequest(BaseModel):
    strict: bool = False


class PatternSummary(BaseModel):
    id: str
    name: str
    category: str
    description: str = ""
    tags: List[str] = []


class PatternDetail(PatternSummary):
    question: str = ""
    rationale: List[str] = []
    participants: List[str] = []
    applicable_when: List[str] = []
    trade_offs: Dict[str, str] = {}
    related: List[str] = []
    module: Optional[str] = None
    has_demo: bool = False


class SuggestResponse(BaseModel):
    context_excerpt: str
    suggestions: List[PatternSummary] = []


class RunResponse(BaseModel):
    pattern_id: str
    output: str
    succeeded: bool
    result: Any = None
    error: Optional[str] = None
    duration_ms: float = 0.0
    persisted: bool = False
