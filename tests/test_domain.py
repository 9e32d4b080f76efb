"""
Test Suite for domain models

Tests settings invariants and immutability.
"""

import dataclasses

import pytest

from model_registry import (
    PROVIDER_TEMPLATES,
    EmbeddingSettings,
    EmbeddingType,
    LLMSettings,
    LLMType,
    ModelProvider,
)
from model_registry.infrastructure.llm_providers import EMBEDDING_FACTORIES, LLM_FACTORIES


def make_embedding(**overrides):
    fields = dict(
        type=EmbeddingType.EMBEDDING,
        provider=ModelProvider.OPENAI,
        name="test-embedding",
        args={"modelName": "text-embedding-ada-002"},
        credentials={"apiKey": None},
        embedding_size=1536,
    )
    fields.update(overrides)
    return EmbeddingSettings(**fields)


class TestEmbeddingSettings:
    """Test embedding size invariant."""

    def test_valid_embedding(self):
        assert make_embedding().embedding_size == 1536

    @pytest.mark.parametrize("size", [0, -1, 1.5])
    def test_invalid_embedding_size(self, size):
        with pytest.raises(ValueError):
            make_embedding(embedding_size=size)

    def test_embedding_size_required(self):
        with pytest.raises(ValueError):
            EmbeddingSettings(type=EmbeddingType.EMBEDDING, provider=ModelProvider.OPENAI, name="x")

    def test_llm_settings_have_no_embedding_size(self):
        assert not hasattr(LLMSettings(LLMType.CHAT_COMPLETION, ModelProvider.OPENAI, "x"), "embedding_size")


class TestImmutability:
    """Catalog entries must not be editable in place."""

    def test_fields_frozen(self):
        settings = PROVIDER_TEMPLATES[ModelProvider.OPENAI].llms[0]

        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.name = "renamed"

    def test_args_read_only(self):
        settings = PROVIDER_TEMPLATES[ModelProvider.OPENAI].llms[0]

        with pytest.raises(TypeError):
            settings.args["maxTokens"] = 10

    def test_credentials_read_only(self):
        settings = PROVIDER_TEMPLATES[ModelProvider.OPENAI].embeddings[0]

        with pytest.raises(TypeError):
            settings.credentials["apiKey"] = "sk-leak"

    def test_input_dict_copied(self):
        args = {"modelName": "gpt-4"}
        settings = LLMSettings(LLMType.CHAT_COMPLETION, ModelProvider.OPENAI, "x", args=args)

        args["modelName"] = "changed"

        assert settings.args["modelName"] == "gpt-4"

    def test_settings_hashable(self):
        template = PROVIDER_TEMPLATES[ModelProvider.OPENAI]
        entries = set(template.llms + template.embeddings)

        assert len(entries) == 4
        assert template.llms[1] in entries

    def test_equal_settings_hash_equal(self):
        first = LLMSettings(LLMType.CHAT_COMPLETION, ModelProvider.OPENAI, "x", args={"modelName": "gpt-4"})
        second = LLMSettings(LLMType.CHAT_COMPLETION, ModelProvider.OPENAI, "x", args={"modelName": "gpt-4"})

        assert first == second
        assert hash(first) == hash(second)

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            LLMSettings(LLMType.CHAT_COMPLETION, ModelProvider.OPENAI, "")


class TestCatalogIntegrity:
    """Test catalog-wide invariants."""

    def test_every_catalog_type_has_factory(self):
        for template in PROVIDER_TEMPLATES.values():
            for llm in template.llms:
                assert llm.type in LLM_FACTORIES
            for embedding in template.embeddings:
                assert embedding.type in EMBEDDING_FACTORIES

    def test_credential_placeholders_unset(self):
        for template in PROVIDER_TEMPLATES.values():
            for settings in template.llms + template.embeddings:
                assert all(value is None for value in settings.credentials.values())

    def test_entries_belong_to_their_provider(self):
        for provider, template in PROVIDER_TEMPLATES.items():
            assert template.provider == provider
            for settings in template.llms + template.embeddings:
                assert settings.provider == provider

    def test_type_tags_match_strings(self):
        assert LLMType.CHAT_COMPLETION == "chat-completion"
        assert LLMType.COMPLETION == "completion"
        assert EmbeddingType.EMBEDDING == "embedding"
