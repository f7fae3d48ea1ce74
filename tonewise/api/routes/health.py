# tonewise/api/routes/health.py
import logging

from fastapi import APIRouter

from tonewise.api.dto.analyze_dto import HealthResponse
from tonewise.services.analysis_service import utc_timestamp

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health", response_model=HealthResponse)
def health_check():
    logger.debug("[health_check] <-.")
    return HealthResponse(status="OK", timestamp=utc_timestamp())
