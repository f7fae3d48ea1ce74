# tonewise/api/routes/analyze.py
import logging
from typing import Optional
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from tonewise.api.dto.analyze_dto import AnalyzeRequest, CompareRequest, AnalysisResponse, ErrorResponse
from tonewise.domain.exceptions import InvalidInput
from tonewise.domain.models.analysis_models import AnalysisResult
from tonewise.infrastructure.di_container import get_analysis_service
from tonewise.services.analysis_service import AnalysisService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api")

ANALYZE_FAILURE_MESSAGE = "Failed to analyze message. Please try again."
COMPARE_FAILURE_MESSAGE = "Failed to compare messages. Please try again."

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def _to_response(result: AnalysisResult) -> AnalysisResponse:
    return AnalysisResponse(
        analysis=result.analysis,
        confidenceLevel=result.confidence_level.value if result.confidence_level else None,
        timestamp=result.timestamp
    )


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/analyze",
             response_model=AnalysisResponse,
             responses=_ERROR_RESPONSES,
             tags=["Анализ тона сообщения"])
async def analyze_message(
    request: Optional[AnalyzeRequest] = None,
    analysis_service: AnalysisService = Depends(get_analysis_service)
):
    """Анализирует тон, намерение и подтекст одного сообщения"""
    request = request or AnalyzeRequest()
    logger.info("[analyze_message] <- message type=%s", type(request.message).__name__)

    try:
        result = await analysis_service.analyze_message(request.message, request.context)
        return _to_response(result)

    except InvalidInput as e:
        logger.warning("[analyze_message] Invalid input: %s", e.message)
        return _error(400, e.message)
    except Exception:
        logger.exception("[analyze_message] Analysis error")
        return _error(500, ANALYZE_FAILURE_MESSAGE)


@router.post("/compare",
             response_model=AnalysisResponse,
             responses=_ERROR_RESPONSES,
             tags=["Сравнение последовательности сообщений"])
async def compare_messages(
    request: Optional[CompareRequest] = None,
    analysis_service: AnalysisService = Depends(get_analysis_service)
):
    """Анализирует паттерны тона и динамику отношений в последовательности сообщений"""
    request = request or CompareRequest()
    logger.info("[compare_messages] <- messages type=%s", type(request.messages).__name__)

    try:
        result = await analysis_service.compare_messages(request.messages, request.context)
        return _to_response(result)

    except InvalidInput as e:
        logger.warning("[compare_messages] Invalid input: %s", e.message)
        return _error(400, e.message)
    except Exception:
        logger.exception("[compare_messages] Comparison error")
        return _error(500, COMPARE_FAILURE_MESSAGE)
