# page_assistant/services/tool_classifier.py
import re
from typing import Dict, List, Pattern, Tuple

from page_assistant.models import Intent

# Ordered by priority: the first rule whose pattern matches decides the intent.
# Vocabulary is bilingual (English and Chinese) and matched as substrings.
TOOL_RULES: List[Tuple[Intent, Pattern[str]]] = [
    (Intent.DOM, re.compile(r"dom|html|结构|标签|元素|语义|h\d|div|span|semantic", re.IGNORECASE)),
    (Intent.STYLES, re.compile(
        r"css|样式|颜色|字体|大小|间距|padding|margin|font|color|width|height", re.IGNORECASE
    )),
    (Intent.PAGE_INFO, re.compile(
        r"页面|标题|链接|表单|可访问性|无障碍|accessibility|a11y|form|input", re.IGNORECASE
    )),
    (Intent.IMAGES, re.compile(r"图片|image|img|picture|photo|src|alt", re.IGNORECASE)),
    (Intent.NETWORK, re.compile(
        r"网络|请求|加载|慢|性能|资源|resource|network|request|speed|slow|performance", re.IGNORECASE
    )),
]

TOOL_DESCRIPTIONS: Dict[Intent, str] = {
    Intent.NONE: "No tool needed, answer directly",
    Intent.DOM: "Get the page DOM structure",
    Intent.STYLES: "Get the page style information",
    Intent.PAGE_INFO: "Get page element statistics",
    Intent.IMAGES: "Get the list of page images",
    Intent.NETWORK: "Get the network request analysis",
}

def classify(question: str) -> Intent:
    """
    Picks the page-data tool most relevant to a question.

    Args:
        question: The user's question.

    Returns:
        The intent of the first matching rule, or Intent.NONE.
    """
    lower_question = question.lower()
    for intent, pattern in TOOL_RULES:
        if pattern.search(lower_question):
            return intent
    return Intent.NONE

def describe(intent: Intent) -> str:
    return TOOL_DESCRIPTIONS[intent]
