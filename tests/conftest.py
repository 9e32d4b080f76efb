"""Shared fixtures for model registry tests."""

import pytest

from model_registry import get_embedding_settings, get_llm_settings


@pytest.fixture(autouse=True)
def no_env_api_key(monkeypatch):
    """Keep a developer's real key out of the tests."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


@pytest.fixture
def credentials():
    return {"apiKey": "sk-test-key"}


@pytest.fixture
def chat_settings():
    return get_llm_settings("openai-gpt-3.5-turbo")


@pytest.fixture
def embedding_settings():
    return get_embedding_settings("openai-text-embedding-ada-002")
