# page_assistant/services/scenario_service.py
"""
Canned multi-step analysis plans.

A plan is template text injected into the prompt to steer the model toward a
structured answer; nothing here reasons about the page itself.
"""
import logging
import re
from typing import Callable, List, Optional, Tuple

from page_assistant.models import Intent, Scenario, ScenarioContext

logger = logging.getLogger(__name__)

# Questions matching this run scenario synthesis even when a specific tool was picked.
SYNTHESIS_TRIGGER = re.compile(r"为什么|原因|优化|无障碍|why|optimi[sz]e|accessibility", re.IGNORECASE)

BOTTLENECK_PLAN = """
[Multi-step analysis]
1. First analyze the network requests and find the resources that take longest to load
2. Then check the DOM structure for render-blocking scripts
3. Finally decide whether the critical rendering path is blocked

Suggested points to cover:
- The most expensive resource types (JS/CSS/images)
- Whether synchronous scripts block page load
- Whether non-critical resources can be deferred
"""

OPTIMIZATION_PLAN = """
[Multi-step optimization analysis]
1. Analyze code size
   - Check the largest resource files
   - Decide whether code splitting is needed

2. Analyze network bottlenecks
   - Identify the slowest requests
   - Consider CDN caching

3. Analyze the DOM structure
   - Look for unnecessary DOM nodes
   - Simplify CSS selectors

4. Give concrete recommendations
   - Lazy-load images
   - Compress resources
   - Enable a caching strategy
"""

ACCESSIBILITY_PLAN = """
[Multi-step accessibility analysis]
1. Check HTML semantics
   - Are the right elements used?
   - Is the heading hierarchy correct?

2. Check interactive elements
   - Can every button receive focus?
   - Are form labels associated with their inputs?

3. Check visual elements
   - Is the color contrast sufficient?
   - Do images provide alternative text (alt)?

4. Check animation and dynamic content
   - Is prefers-reduced-motion respected?
   - Are there animation traps?
"""

def _matches(pattern: str) -> Callable[[str], bool]:
    compiled = re.compile(pattern, re.IGNORECASE)
    return lambda question: compiled.search(question) is not None

# Evaluated in order; when several scenarios match, the last one wins.
SCENARIOS: List[Tuple[Scenario, Callable[[str], bool], str]] = [
    (Scenario.PERFORMANCE_BOTTLENECK, _matches(r"为什么|原因|瓶颈|为啥|slow|why|bottleneck"), BOTTLENECK_PLAN),
    (Scenario.OPTIMIZATION, _matches(r"优化|提升|改进|加快|speed.*up|improve|optimi[sz]e"), OPTIMIZATION_PLAN),
    (Scenario.ACCESSIBILITY, _matches(r"无障碍|accessibility|a11y|barrier|inclusive"), ACCESSIBILITY_PLAN),
]

def should_synthesize(question: str, intent: Intent) -> bool:
    return intent is Intent.NONE or SYNTHESIS_TRIGGER.search(question) is not None

def synthesize(question: str) -> Optional[ScenarioContext]:
    """
    Builds the analysis plan for a question.

    Args:
        question: The user's question.

    Returns:
        The plan of the last matching scenario, or None if no scenario matches.
    """
    lower_question = question.lower()
    selected: Optional[ScenarioContext] = None
    for scenario, predicate, template in SCENARIOS:
        if predicate(lower_question):
            logger.info(f"Scenario matched: {scenario.value}")
            selected = ScenarioContext(scenario=scenario, text=template)
    return selected
