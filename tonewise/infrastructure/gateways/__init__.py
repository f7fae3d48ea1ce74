# tonewise/infrastructure/gateways/__init__.py
from .anthropic_chat_gateway import AnthropicChatGateway

__all__ = [
    "AnthropicChatGateway"
]
