"""
Static provider catalog.

Built once at import time and never mutated. Model names must be unique
across all providers since lookups key on name alone.
"""

from types import MappingProxyType
from typing import Mapping

from .models import (
    EmbeddingSettings,
    EmbeddingType,
    LLMSettings,
    LLMType,
    ModelProvider,
    ProviderTemplate,
)


PROVIDER_TEMPLATES: Mapping[ModelProvider, ProviderTemplate] = MappingProxyType({
    ModelProvider.OPENAI: ProviderTemplate(
        provider=ModelProvider.OPENAI,
        llms=(
            LLMSettings(
                type=LLMType.CHAT_COMPLETION,
                provider=ModelProvider.OPENAI,
                name="openai-gpt-3.5-turbo",
                credentials={"apiKey": None},
                args={"modelName": "gpt-3.5-turbo", "maxTokens": 1500},
            ),
            LLMSettings(
                # GPT-4 access may require an approved account
                type=LLMType.CHAT_COMPLETION,
                provider=ModelProvider.OPENAI,
                name="openai-gpt-4",
                credentials={"apiKey": None},
                args={"modelName": "gpt-4", "maxTokens": 1500},
            ),
            LLMSettings(
                type=LLMType.COMPLETION,
                provider=ModelProvider.OPENAI,
                name="openai-text-davinci-003",
                credentials={"apiKey": None},
                args={"modelName": "text-davinci-003", "maxTokens": 1500},
            ),
        ),
        embeddings=(
            EmbeddingSettings(
                type=EmbeddingType.EMBEDDING,
                provider=ModelProvider.OPENAI,
                name="openai-text-embedding-ada-002",
                credentials={"apiKey": None},
                args={"modelName": "text-embedding-ada-002"},
                embedding_size=1536,
            ),
        ),
    ),
})
