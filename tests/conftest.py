"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from helpers import FakeLLMGateway
from page_assistant.core.config import Settings
from page_assistant.main import app, get_llm_gateway


@pytest.fixture
def fake_gateway() -> FakeLLMGateway:
    return FakeLLMGateway()


@pytest.fixture
def client(fake_gateway):
    app.dependency_overrides[get_llm_gateway] = lambda: fake_gateway
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        LLM_PROVIDER="siliconflow",
        SILICONFLOW_API_KEY="sk-test",
        SILICONFLOW_BASE_URL="https://llm.test/v1",
        GROQ_API_KEY="gsk-test",
    )
