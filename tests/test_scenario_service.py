"""Tests for the canned analysis-plan synthesizer."""

from page_assistant.models import Intent, Scenario
from page_assistant.services import scenario_service


def test_no_scenario_returns_none():
    assert scenario_service.synthesize("hello there") is None


def test_bottleneck_scenario():
    context = scenario_service.synthesize("What is the bottleneck here?")
    assert context.scenario is Scenario.PERFORMANCE_BOTTLENECK
    assert context.text == scenario_service.BOTTLENECK_PLAN


def test_optimization_scenario():
    context = scenario_service.synthesize("How do I optimize this page?")
    assert context.scenario is Scenario.OPTIMIZATION
    assert context.text == scenario_service.OPTIMIZATION_PLAN


def test_bottleneck_and_accessibility_yields_accessibility():
    context = scenario_service.synthesize("Why is the accessibility score low?")
    assert context.scenario is Scenario.ACCESSIBILITY
    assert context.text == scenario_service.ACCESSIBILITY_PLAN


def test_last_match_wins_across_all_three():
    context = scenario_service.synthesize("why is it slow, can I improve a11y?")
    assert context.scenario is Scenario.ACCESSIBILITY


def test_bottleneck_then_optimization_yields_optimization():
    context = scenario_service.synthesize("为什么这么慢，怎么优化")
    assert context.scenario is Scenario.OPTIMIZATION


def test_scenario_order():
    assert [scenario for scenario, _, _ in scenario_service.SCENARIOS] == [
        Scenario.PERFORMANCE_BOTTLENECK, Scenario.OPTIMIZATION, Scenario.ACCESSIBILITY,
    ]


def test_should_synthesize_when_no_intent():
    assert scenario_service.should_synthesize("hello", Intent.NONE)


def test_should_synthesize_on_broad_trigger_despite_intent():
    assert scenario_service.should_synthesize("Why is the DOM so large?", Intent.DOM)
    assert scenario_service.should_synthesize("怎么优化图片", Intent.IMAGES)


def test_should_not_synthesize_for_plain_tool_question():
    assert not scenario_service.should_synthesize("Show me the network requests", Intent.NETWORK)
