# page_assistant/services/ask_service.py
import logging

from page_assistant.models import AskRequest, AskResponse
from page_assistant.services import prompt_service, scenario_service, suggestion_service, tool_classifier
from page_assistant.services.llm_service import LLMGateway

logger = logging.getLogger(__name__)

async def answer_question(request: AskRequest, gateway: LLMGateway) -> AskResponse:
    """
    Runs the full question pipeline for one request.

    Args:
        request: The validated question and optional page context.
        gateway: The upstream LLM to ask.

    Returns:
        The answer, a page-context status string and follow-up suggestions.
    """
    question = request.question
    logger.info(f"Question: {question}")

    # Step 1: Pick the page-data tool the question is about
    intent = tool_classifier.classify(question)
    logger.info(f"Detected tool: {tool_classifier.describe(intent)}")

    # Step 2: Attach a canned analysis plan when the question calls for one
    scenario = None
    if scenario_service.should_synthesize(question, intent):
        scenario = scenario_service.synthesize(question)
        logger.info("Multi-step reasoning started")

    # Step 3: Build the prompt
    messages = prompt_service.assemble(
        question,
        page_context=request.context,
        scenario_context=scenario.text if scenario else None,
    )

    # Step 4: Ask the LLM
    answer = await gateway.complete(messages)
    logger.info(f"Answer generated, length: {len(answer)} characters")

    # Step 5: Follow-up actions for the UI
    suggestions = suggestion_service.generate(question, intent)

    return AskResponse(
        answer=answer,
        context="Page context processed" if request.context else "No page context",
        suggestions=suggestions,
    )
