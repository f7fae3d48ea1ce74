# tonewise/api/dto/analyze_dto.py
from pydantic import BaseModel, ConfigDict
from typing import Any, Optional


# Поля принимаются как есть: форма и длина проверяются в services/validation.py,
# чтобы клиент получил 400 с конкретным сообщением, а не 422 от pydantic.
class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: Any = None
    context: Any = None
    type: Any = None  # принимается, но не используется


class CompareRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    messages: Any = None
    context: Any = None
    type: Any = None  # принимается, но не используется


class AnalysisResponse(BaseModel):
    analysis: str
    confidenceLevel: Optional[str] = None
    timestamp: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    timestamp: str
