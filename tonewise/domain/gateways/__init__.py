# tonewise/domain/gateways/__init__.py
from .chat_gateway import ChatGateway

__all__ = [
    "ChatGateway"
]
