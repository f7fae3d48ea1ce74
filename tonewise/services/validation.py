# tonewise/services/validation.py
"""
Проверка входных полей запросов. Возвращает нормализованные данные или поднимает InvalidInput
с первым найденным нарушением.
"""
from typing import Any

from tonewise.domain.exceptions import InvalidInput
from tonewise.domain.models.analysis_models import AnalysisRequest, ComparisonRequest

MAX_MESSAGE_LENGTH = 5000
MAX_COMPARISON_MESSAGE_LENGTH = 2000
MIN_COMPARISON_MESSAGES = 2
MAX_COMPARISON_MESSAGES = 10


def _validate_context(context: Any) -> str:
    # Пустые значения (None, "", 0, false) считаются отсутствующим контекстом
    if not context:
        return ""
    if not isinstance(context, str):
        raise InvalidInput("Context must be a string")
    return context


def validate_analysis_request(message: Any, context: Any = None) -> AnalysisRequest:
    if not message or not isinstance(message, str):
        raise InvalidInput("Message is required and must be a string")

    if len(message) > MAX_MESSAGE_LENGTH:
        raise InvalidInput(f"Message is too long (max {MAX_MESSAGE_LENGTH} characters)")

    return AnalysisRequest(message=message, context=_validate_context(context))


def validate_comparison_request(messages: Any, context: Any = None) -> ComparisonRequest:
    if not isinstance(messages, list) or len(messages) < MIN_COMPARISON_MESSAGES:
        raise InvalidInput(f"At least {MIN_COMPARISON_MESSAGES} messages are required for comparison")

    if len(messages) > MAX_COMPARISON_MESSAGES:
        raise InvalidInput(f"Too many messages (max {MAX_COMPARISON_MESSAGES} for comparison)")

    for msg in messages:
        if not msg or not isinstance(msg, str):
            raise InvalidInput("All messages must be non-empty strings")
        if len(msg) > MAX_COMPARISON_MESSAGE_LENGTH:
            raise InvalidInput(f"Each message must be under {MAX_COMPARISON_MESSAGE_LENGTH} characters")

    return ComparisonRequest(messages=list(messages), context=_validate_context(context))
