# tonewise/infrastructure/gateways/anthropic_chat_gateway.py
import logging
from typing import Optional

from langchain_anthropic import ChatAnthropic
from langchain_core.messages import HumanMessage

from tonewise.domain.exceptions import GatewayFailure
from tonewise.domain.gateways.chat_gateway import ChatGateway

logger = logging.getLogger(__name__)


def _extract_text(content) -> Optional[str]:
    """Возвращает текст первого текстового блока ответа модели"""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        for block in content:
            if isinstance(block, str):
                return block
            if isinstance(block, dict) and block.get("type") == "text":
                return block.get("text")
    return None


class AnthropicChatGateway(ChatGateway):
    """Реализация ChatGateway через langchain-anthropic. Один вызов, без повторов и стриминга."""

    def __init__(self, model: str, api_key: Optional[str] = None, llm: Optional[ChatAnthropic] = None):
        self.model = model
        if llm is None:
            # max_retries=0: один вызов, без повторов клиента
            kwargs = {"model": model, "max_retries": 0}
            if api_key:
                kwargs["api_key"] = api_key
            llm = ChatAnthropic(**kwargs)
        self._llm = llm

    async def complete(self, prompt: str, max_tokens: int) -> str:
        logger.info("[AnthropicChatGateway.complete] <- model=%s, max_tokens=%d, prompt length=%d",
                    self.model, max_tokens, len(prompt))
        try:
            response = await self._llm.bind(max_tokens=max_tokens).ainvoke([HumanMessage(content=prompt)])
        except Exception as e:
            raise GatewayFailure(f"Model call failed: {e}") from e

        text = _extract_text(getattr(response, "content", None))
        if text is None:
            raise GatewayFailure("Model response contains no text content")

        logger.info("[AnthropicChatGateway.complete] -> response length=%d", len(text))
        return text
