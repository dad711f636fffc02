# page_assistant/services/llm_service.py
import logging
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

import httpx
from groq import APIStatusError
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.output_parsers import StrOutputParser
from langchain_core.runnables import Runnable
from langchain_groq import ChatGroq

from page_assistant.core.config import Settings
from page_assistant.core.errors import MissingCredentialError, UpstreamCallFailedError, error_for_status
from page_assistant.models import PromptMessage

logger = logging.getLogger(__name__)

MAX_TOKENS = 1000
TEMPERATURE = 0.7
REQUEST_TIMEOUT = 30.0

class LLMGateway(ABC):
    """A single, non-retried chat completion against an upstream LLM."""

    @abstractmethod
    async def complete(self, messages: List[PromptMessage]) -> str:
        """
        Sends the messages upstream and returns the answer text.

        Raises:
            MissingCredentialError: If no API key is configured. Checked before any network call.
            InvalidCredentialError: On HTTP 401.
            RateLimitedOrQuotaExhaustedError: On HTTP 429.
            UpstreamServerError: On HTTP 500.
            UpstreamCallFailedError: On any other HTTP error status.
        """

class HttpLLMGateway(LLMGateway):
    """Calls an OpenAI-compatible chat completions endpoint (SiliconFlow by default)."""

    def __init__(self, config: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._config = config
        self._transport = transport

    def _headers(self, api_key: str) -> dict:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    async def complete(self, messages: List[PromptMessage]) -> str:
        api_key = self._config.SILICONFLOW_API_KEY
        if not api_key:
            raise MissingCredentialError("SILICONFLOW_API_KEY environment variable is not set")

        payload = {
            "model": self._config.LLM_MODEL,
            "messages": [message.model_dump() for message in messages],
            "max_tokens": MAX_TOKENS,
            "temperature": TEMPERATURE,
        }
        url = f"{self._config.SILICONFLOW_BASE_URL.rstrip('/')}/chat/completions"

        logger.info(f"Calling LLM API: {url} (model: {self._config.LLM_MODEL})")
        async with httpx.AsyncClient(transport=self._transport, timeout=REQUEST_TIMEOUT) as client:
            try:
                response = await client.post(url, json=payload, headers=self._headers(api_key))
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.error(f"LLM API call failed with status {e.response.status_code}: {e.response.text}")
                raise error_for_status(e.response.status_code, e.response.text) from e

        try:
            answer = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise UpstreamCallFailedError(response.status_code, response.text) from e
        if not isinstance(answer, str):
            raise UpstreamCallFailedError(response.status_code, response.text)

        logger.info("LLM answer received")
        return answer

def to_langchain_messages(messages: List[PromptMessage]) -> List[BaseMessage]:
    # Convert our message models to LangChain message objects
    langchain_messages: List[BaseMessage] = []
    for msg in messages:
        if msg.role == "system":
            langchain_messages.append(SystemMessage(content=msg.content))
        elif msg.role == "user":
            langchain_messages.append(HumanMessage(content=msg.content))
        elif msg.role == "assistant":
            langchain_messages.append(AIMessage(content=msg.content))
    return langchain_messages

class GroqLLMGateway(LLMGateway):
    """Calls Groq through LangChain's ChatGroq model."""

    def __init__(self, config: Settings, llm_factory: Optional[Callable[[str], Runnable]] = None):
        self._config = config
        self._llm_factory = llm_factory or self._build_llm

    def _build_llm(self, api_key: str) -> Runnable:
        return ChatGroq(
            model_name=self._config.GROQ_MODEL,
            groq_api_key=api_key,
            temperature=TEMPERATURE,
            max_tokens=MAX_TOKENS,
            request_timeout=REQUEST_TIMEOUT,
            max_retries=0,
        )

    async def complete(self, messages: List[PromptMessage]) -> str:
        api_key = self._config.GROQ_API_KEY
        if not api_key:
            raise MissingCredentialError("GROQ_API_KEY environment variable is not set")

        chain = self._llm_factory(api_key) | StrOutputParser()

        logger.info(f"Calling Groq (model: {self._config.GROQ_MODEL})")
        try:
            answer = await chain.ainvoke(to_langchain_messages(messages))
        except APIStatusError as e:
            logger.error(f"Groq call failed with status {e.status_code}: {e.response.text}")
            raise error_for_status(e.status_code, e.response.text) from e

        logger.info("LLM answer received")
        return answer

def create_gateway(config: Settings) -> LLMGateway:
    """Returns the gateway for the configured LLM provider."""
    if config.LLM_PROVIDER == "groq":
        return GroqLLMGateway(config)
    return HttpLLMGateway(config)
