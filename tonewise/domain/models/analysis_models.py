# tonewise/domain/models/analysis_models.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class ConfidenceLevel(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass(frozen=True)
class AnalysisRequest:
    message: str
    context: str = ""


@dataclass(frozen=True)
class ComparisonRequest:
    messages: List[str]
    context: str = ""


@dataclass
class AnalysisResult:
    analysis: str
    confidence_level: Optional[ConfidenceLevel]
    timestamp: str
