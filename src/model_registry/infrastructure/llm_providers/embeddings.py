"""
Embedding model factories backed by langchain_openai.

Currently supports OpenAI embeddings (text-embedding-ada-002).
"""

from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping

from langchain_core.embeddings import Embeddings
from langchain_openai import OpenAIEmbeddings
from loguru import logger

from model_registry.domain.errors import UnsupportedEmbeddingType
from model_registry.domain.models import EmbeddingType, ModelSettings
from .llm_services import build_client_kwargs


def _openai_embeddings(kwargs: Dict[str, Any]) -> Embeddings:
    return OpenAIEmbeddings(**kwargs)


# Embedding models registry
EMBEDDING_FACTORIES: Mapping[EmbeddingType, Callable[[Dict[str, Any]], Embeddings]] = MappingProxyType({
    EmbeddingType.EMBEDDING: _openai_embeddings,
})


def load_embedding_from_config(settings: ModelSettings) -> Embeddings:
    """
    Instantiate the embedding model client described by settings.

    Args:
        settings: Embedding settings with credentials merged in as needed

    Returns:
        A LangChain embeddings instance ready for vectorization

    Raises:
        UnsupportedEmbeddingType: If no factory is registered for settings.type
    """
    factory = EMBEDDING_FACTORIES.get(settings.type)
    if factory is None:
        logger.warning(f"No embedding factory for type {settings.type!r} ({settings.name})")
        raise UnsupportedEmbeddingType(settings.type)

    logger.debug(f"Loading embedding model {settings.name}")
    return factory(build_client_kwargs(settings))
