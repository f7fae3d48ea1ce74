# tonewise/domain/exceptions.py


class AnalysisServiceError(Exception):
    """Базовая ошибка конвейера анализа"""


class InvalidInput(AnalysisServiceError):
    """Данные клиента нарушают ограничения формы, длины или количества. Сообщение показывается клиенту."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class GatewayFailure(AnalysisServiceError):
    """Вызов модели завершился ошибкой. Детали только в логах, клиенту не отдаются."""
