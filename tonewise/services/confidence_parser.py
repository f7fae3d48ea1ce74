# tonewise/services/confidence_parser.py

import logging
import re
from typing import Optional

from tonewise.domain.models.analysis_models import ConfidenceLevel

logger = logging.getLogger(__name__)

# "Confidence Level", любые символы до двоеточия, затем значение до перевода строки, "**" или конца текста
CONFIDENCE_COLON_RE = re.compile(r"Confidence Level.*?:(.*?)(?:\n|\*\*|$)", re.IGNORECASE)
# Запасной вариант без двоеточия: "Confidence Level - medium"
CONFIDENCE_DASH_RE = re.compile(r"Confidence Level[^\w\n]*?[ \t][-–—][ \t](.*?)(?:\n|\*\*|$)", re.IGNORECASE)

# Порядок важен: high проверяется первым
_KEYWORDS = (
    ("high", ConfidenceLevel.HIGH),
    ("medium", ConfidenceLevel.MEDIUM),
    ("low", ConfidenceLevel.LOW),
)


def extract_confidence_level(analysis: str) -> Optional[ConfidenceLevel]:
    """
    Извлекает грубую оценку уверенности (High/Medium/Low) из свободного текста модели.

    Эвристика, а не строгий парсер: если фраза не найдена или в захваченном фрагменте
    нет ни одного ключевого слова, возвращается None.
    """
    if not analysis:
        return None

    match = CONFIDENCE_COLON_RE.search(analysis) or CONFIDENCE_DASH_RE.search(analysis)
    if not match:
        logger.debug("[extract_confidence_level] -> no 'Confidence Level' label found")
        return None

    level = match.group(1).strip().lower()
    for keyword, confidence in _KEYWORDS:
        if keyword in level:
            return confidence

    logger.debug("[extract_confidence_level] -> unrecognized value '%s'", level)
    return None
