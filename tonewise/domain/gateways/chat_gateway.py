# tonewise/domain/gateways/chat_gateway.py
from abc import ABC, abstractmethod


class ChatGateway(ABC):
    """Абстракция внешнего chat-completion API"""

    @abstractmethod
    async def complete(self, prompt: str, max_tokens: int) -> str:
        """
        Отправляет prompt единственным user-сообщением и возвращает сгенерированный текст.
        Любая ошибка клиента поднимается как GatewayFailure.
        """
        pass
