# tonewise/infrastructure/di_container.py
"""
Dependency Injection контейнер: gateway создается один раз из конфигурации
и передается в сервисы по ссылке.
"""
import logging

from tonewise.config import ANTHROPIC_API_KEY, LLM_MODEL
from tonewise.domain.gateways.chat_gateway import ChatGateway
from tonewise.infrastructure.gateways.anthropic_chat_gateway import AnthropicChatGateway
from tonewise.services.analysis_service import AnalysisService

logger = logging.getLogger(__name__)


class DIContainer:
    """Контейнер для управления зависимостями"""

    def __init__(self, gateway: ChatGateway = None):
        self._gateways = {}
        self._services = {}
        self._initialize_gateways(gateway)
        self._initialize_services()

    def _initialize_gateways(self, gateway: ChatGateway = None):
        logger.info("[DIContainer] Initializing gateways...")
        if gateway is None:
            if not ANTHROPIC_API_KEY:
                logger.warning("[DIContainer] ANTHROPIC_API_KEY is not set, model calls will fail")
            gateway = AnthropicChatGateway(model=LLM_MODEL, api_key=ANTHROPIC_API_KEY)
        self._gateways[ChatGateway] = gateway
        logger.info("[DIContainer] Gateway initialized: %s", type(gateway).__name__)

    def _initialize_services(self):
        logger.info("[DIContainer] Initializing services...")
        self._services[AnalysisService] = AnalysisService(gateway=self._gateways[ChatGateway])
        logger.info("[DIContainer] Services initialized successfully")

    def get_gateway(self, gateway_type: type):
        return self._gateways.get(gateway_type)

    def get_service(self, service_type: type):
        return self._services.get(service_type)


# Глобальный экземпляр контейнера
_container = None


def get_container() -> DIContainer:
    """Получение глобального контейнера"""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


# Dependencies для FastAPI
def get_analysis_service() -> AnalysisService:
    """Dependency для получения AnalysisService"""
    return get_container().get_service(AnalysisService)
