# tonewise/services/analysis_service.py

import logging
from datetime import datetime, timezone
from typing import Any

from tonewise.config import ANALYZE_MAX_TOKENS, COMPARE_MAX_TOKENS
from tonewise.domain.gateways.chat_gateway import ChatGateway
from tonewise.domain.models.analysis_models import AnalysisResult
from tonewise.services.confidence_parser import extract_confidence_level
from tonewise.services.prompt_builder import build_single_analysis_prompt, build_comparison_prompt
from tonewise.services.validation import validate_analysis_request, validate_comparison_request

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """ISO-8601 в UTC с миллисекундами и суффиксом Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class AnalysisService:
    """
    Конвейер анализа: валидация -> промпт -> один вызов модели -> извлечение уровня уверенности.

    Состояния между запросами нет, gateway внедряется через конструктор.
    Ошибки валидации поднимаются как InvalidInput до обращения к модели,
    ошибки вызова модели - как GatewayFailure.
    """

    def __init__(self, gateway: ChatGateway,
                 analyze_max_tokens: int = ANALYZE_MAX_TOKENS,
                 compare_max_tokens: int = COMPARE_MAX_TOKENS):
        self.gateway = gateway
        self.analyze_max_tokens = analyze_max_tokens
        self.compare_max_tokens = compare_max_tokens

    async def analyze_message(self, message: Any, context: Any = None) -> AnalysisResult:
        request = validate_analysis_request(message, context)
        logger.info("[AnalysisService.analyze_message] <- message length=%d, context=%s",
                    len(request.message), bool(request.context))

        prompt = build_single_analysis_prompt(request.message, request.context)
        analysis = await self.gateway.complete(prompt, self.analyze_max_tokens)
        result = AnalysisResult(
            analysis=analysis,
            confidence_level=extract_confidence_level(analysis),
            timestamp=utc_timestamp()
        )

        logger.info("[AnalysisService.analyze_message] -> confidence=%s",
                    result.confidence_level.value if result.confidence_level else None)
        return result

    async def compare_messages(self, messages: Any, context: Any = None) -> AnalysisResult:
        request = validate_comparison_request(messages, context)
        logger.info("[AnalysisService.compare_messages] <- %d messages, context=%s",
                    len(request.messages), bool(request.context))

        prompt = build_comparison_prompt(request.messages, request.context)
        analysis = await self.gateway.complete(prompt, self.compare_max_tokens)
        result = AnalysisResult(
            analysis=analysis,
            confidence_level=extract_confidence_level(analysis),
            timestamp=utc_timestamp()
        )

        logger.info("[AnalysisService.compare_messages] -> confidence=%s",
                    result.confidence_level.value if result.confidence_level else None)
        return result
