# page_assistant/services/suggestion_service.py
import re
from typing import Any, Callable, Dict, List, Tuple

from page_assistant.models import Intent, Suggestion

IMAGE_KEYWORDS = re.compile(r"图片|image|img|大小|size", re.IGNORECASE)
ACCESSIBILITY_KEYWORDS = re.compile(r"无障碍|accessibility|a11y", re.IGNORECASE)
OPTIMIZATION_KEYWORDS = re.compile(r"优化|性能|慢|improve|optimi[sz]e|performance|slow|speed", re.IGNORECASE)

def _suggestion(id: str, label: str, action: str, params: Dict[str, Any]) -> Callable[[], Suggestion]:
    return lambda: Suggestion(id=id, label=label, action=action, params=dict(params))

# Every rule whose condition holds adds its suggestion, in this order.
SUGGESTION_RULES: List[Tuple[Callable[[str, Intent], bool], Callable[[], Suggestion]]] = [
    (
        lambda question, intent: intent is Intent.NETWORK,
        _suggestion("view-optimization", "📊 View detailed optimization plan", "viewOptimization", {"type": "network"}),
    ),
    (
        lambda question, intent: intent is Intent.IMAGES or IMAGE_KEYWORDS.search(question) is not None,
        _suggestion("generate-srcset", "🖼️ Generate responsive image plan", "generateSrcset", {}),
    ),
    (
        lambda question, intent: ACCESSIBILITY_KEYWORDS.search(question) is not None,
        _suggestion("check-accessibility", "♿ Detailed accessibility check", "checkAccessibility", {}),
    ),
    (
        lambda question, intent: OPTIMIZATION_KEYWORDS.search(question) is not None,
        _suggestion("analyze-more", "🔍 Deeper performance analysis", "analyzeMore", {"type": "performance"}),
    ),
]

def generate(question: str, intent: Intent) -> List[Suggestion]:
    """
    Derives the follow-up actions the UI can offer for an answer.

    Args:
        question: The user's question.
        intent: The intent picked by the tool classifier.

    Returns:
        One suggestion per firing rule, in rule order. May be empty.
    """
    lower_question = question.lower()
    return [build() for condition, build in SUGGESTION_RULES if condition(lower_question, intent)]
