from pydantic import BaseModel, Field, StrictStr, field_validator
from typing import Any, Dict, List, Optional

from string_analyzer.models import StringRecord


class StringCreate(BaseModel):
    value: StrictStr = Field(..., description="String to analyze")

    @field_validator("value")
    @classmethod
    def value_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Value must not be empty")
        return v


class StringListResponse(BaseModel):
    data: List[StringRecord]
    count: int
    filters_applied: Optional[Dict[str, Any]] = None


class InterpretedQuery(BaseModel):
    original: str
    parsed_filters: Dict[str, Any]


class NaturalLanguageResponse(BaseModel):
    data: List[StringRecord]
    count: int
    interpreted_query: InterpretedQuery
