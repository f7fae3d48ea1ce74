# tonewise/domain/models/__init__.py
from .analysis_models import ConfidenceLevel, AnalysisRequest, ComparisonRequest, AnalysisResult

__all__ = [
    "ConfidenceLevel",
    "AnalysisRequest",
    "ComparisonRequest",
    "AnalysisResult"
]
