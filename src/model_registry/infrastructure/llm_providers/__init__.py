"""
LLM providers - factory functions for models.

Maps catalog type tags to langchain_openai clients:
- chat-completion -> ChatOpenAI
- completion -> OpenAI
- embedding -> OpenAIEmbeddings

Usage:
    from model_registry.infrastructure.llm_providers import load_llm_from_config

    llm = load_llm_from_config(settings)
"""

from .llm_services import (
    LLM_FACTORIES,
    build_client_kwargs,
    load_llm_from_config,
)
from .embeddings import (
    EMBEDDING_FACTORIES,
    load_embedding_from_config,
)

__all__ = [
    # Chat LLMs
    "LLM_FACTORIES",
    "build_client_kwargs",
    "load_llm_from_config",
    # Embeddings
    "EMBEDDING_FACTORIES",
    "load_embedding_from_config",
]
