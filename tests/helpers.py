"""Test doubles shared across the test modules."""

from typing import List, Optional

from page_assistant.models import PromptMessage
from page_assistant.services.llm_service import LLMGateway


class FakeLLMGateway(LLMGateway):
    """Records the prompts it receives and answers with a canned reply."""

    def __init__(self, answer: str = "answer text", error: Optional[Exception] = None):
        self.answer = answer
        self.error = error
        self.calls: List[List[PromptMessage]] = []

    async def complete(self, messages: List[PromptMessage]) -> str:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return self.answer
