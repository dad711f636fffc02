"""Tests for prompt assembly."""

from page_assistant.services import prompt_service


def test_two_messages_system_then_user():
    messages = prompt_service.assemble("Why is it slow?", "<div>", "plan")
    assert [m.role for m in messages] == ["system", "user"]
    assert messages[0].content == prompt_service.SYSTEM_PROMPT


def test_user_message_starts_with_question():
    messages = prompt_service.assemble("Is my HTML semantic?", "page facts")
    assert messages[1].content.startswith("Is my HTML semantic?")


def test_question_only():
    messages = prompt_service.assemble("hello")
    assert messages[1].content == "hello"


def test_blank_page_context_adds_no_block():
    for blank in ("", "   \n\t"):
        content = prompt_service.assemble("hello", blank)[1].content
        assert prompt_service.PAGE_INFO_LABEL not in content
        assert content == "hello"


def test_page_context_then_reasoning_block():
    content = prompt_service.assemble("q", "DOM nodes: 1200", "step 1")[1].content
    assert content == (
        f"q\n\n{prompt_service.PAGE_INFO_LABEL}\nDOM nodes: 1200"
        f"\n\n{prompt_service.REASONING_LABEL}\nstep 1"
    )


def test_reasoning_block_without_page_context():
    content = prompt_service.assemble("q", None, "step 1")[1].content
    assert content == f"q\n\n{prompt_service.REASONING_LABEL}\nstep 1"


def test_page_context_is_not_trimmed_or_truncated():
    page = "  " + "x" * 50000 + "  "
    content = prompt_service.assemble("q", page)[1].content
    assert content.endswith(page)
