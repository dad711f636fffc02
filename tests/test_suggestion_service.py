"""Tests for follow-up suggestion generation."""

from page_assistant.models import Intent
from page_assistant.services import suggestion_service


def actions(question, intent):
    return [s.action for s in suggestion_service.generate(question, intent)]


def test_no_suggestions():
    assert suggestion_service.generate("hello", Intent.NONE) == []


def test_network_intent():
    suggestions = suggestion_service.generate("Which request failed?", Intent.NETWORK)
    assert [s.id for s in suggestions] == ["view-optimization"]
    assert suggestions[0].params == {"type": "network"}


def test_images_intent_or_image_keyword():
    assert actions("Are the photos ok?", Intent.IMAGES) == ["generateSrcset"]
    assert actions("What size should the image be?", Intent.DOM) == ["generateSrcset"]


def test_images_and_accessibility_both_fire():
    assert actions("Is image accessibility good?", Intent.IMAGES) == ["generateSrcset", "checkAccessibility"]


def test_optimization_keywords():
    suggestions = suggestion_service.generate("why is my page slow", Intent.NETWORK)
    assert [s.action for s in suggestions] == ["viewOptimization", "analyzeMore"]
    assert suggestions[1].params == {"type": "performance"}


def test_all_rules_fire_in_declaration_order():
    question = "optimize image a11y"
    assert actions(question, Intent.NETWORK) == [
        "viewOptimization", "generateSrcset", "checkAccessibility", "analyzeMore",
    ]


def test_suggestions_are_fresh_objects():
    first = suggestion_service.generate("optimize", Intent.NONE)[0]
    first.params["type"] = "changed"
    second = suggestion_service.generate("optimize", Intent.NONE)[0]
    assert second.params == {"type": "performance"}
