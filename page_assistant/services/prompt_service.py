# page_assistant/services/prompt_service.py
from typing import List, Optional

from page_assistant.models import PromptMessage

# System prompt to define the LLM's role
SYSTEM_PROMPT = """You are a front-end development assistant that helps developers analyze web page problems and optimize their code.

Your responsibilities:
1. Analyze the front-end question the user asks
2. Give concrete advice based on the page information provided (DOM, CSS, network requests, etc.)
3. Answer in concise, friendly language
4. Provide actionable optimization suggestions

If the question is about front-end development, base your analysis on the provided page information first."""

PAGE_INFO_LABEL = "[Page information]"
REASONING_LABEL = "[Reasoning process]"

def build_user_message(question: str, page_context: Optional[str] = None, scenario_context: Optional[str] = None) -> str:
    user_message = question
    if page_context and page_context.strip():
        user_message = f"{question}\n\n{PAGE_INFO_LABEL}\n{page_context}"
    if scenario_context:
        user_message += f"\n\n{REASONING_LABEL}\n{scenario_context}"
    return user_message

def assemble(question: str, page_context: Optional[str] = None, scenario_context: Optional[str] = None) -> List[PromptMessage]:
    """
    Builds the message sequence sent to the LLM.

    Args:
        question: The user's question, placed verbatim at the start of the user message.
        page_context: Page facts gathered by the browser extension. Blank text is ignored.
        scenario_context: The analysis plan text, if one was synthesized.

    Returns:
        Exactly two messages: the system persona and the user message.
    """
    return [
        PromptMessage(role="system", content=SYSTEM_PROMPT),
        PromptMessage(role="user", content=build_user_message(question, page_context, scenario_context)),
    ]
