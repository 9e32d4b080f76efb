"""
Model registry queries over the static provider catalog.

Provides:
- get_all_llms / get_all_embeddings: enumerate model names
- get_llm_credentials_fields / get_embedding_credentials_fields: credential keys
- get_llm_settings / get_embedding_settings: first-match settings lookup
- resolve_credentials: fill credential placeholders for construction
- load_llm / load_embedding: look up, resolve and instantiate by name

Lookups scan providers in declaration order, then entries within each
provider; the first entry whose name matches wins.
"""

from dataclasses import replace
from typing import Any, Dict, Iterator, List, Mapping, Optional

from langchain_core.embeddings import Embeddings
from langchain_core.language_models import BaseLanguageModel

from model_registry.config import get_api_key
from model_registry.domain.catalog import PROVIDER_TEMPLATES
from model_registry.domain.models import (
    EmbeddingSettings,
    LLMSettings,
    ModelProvider,
    ModelSettings,
    ProviderTemplate,
)
from model_registry.infrastructure.llm_providers import (
    load_embedding_from_config,
    load_llm_from_config,
)


def _iter_llms() -> Iterator[LLMSettings]:
    for template in PROVIDER_TEMPLATES.values():
        yield from template.llms


def _iter_embeddings() -> Iterator[EmbeddingSettings]:
    for template in PROVIDER_TEMPLATES.values():
        yield from template.embeddings


# Get all supported LLMs
def get_all_llms() -> List[str]:
    return [llm.name for llm in _iter_llms()]


# Get all supported Embeddings
def get_all_embeddings() -> List[str]:
    return [embedding.name for embedding in _iter_embeddings()]


def get_llm_settings(model_name: str) -> Optional[LLMSettings]:
    """Return the first LLM settings entry named model_name, or None."""
    return next((llm for llm in _iter_llms() if llm.name == model_name), None)


def get_embedding_settings(model_name: str) -> Optional[EmbeddingSettings]:
    """Return the first embedding settings entry named model_name, or None."""
    return next((e for e in _iter_embeddings() if e.name == model_name), None)


def get_llm_credentials_fields(model_name: str) -> set:
    """
    Get the credential field names an LLM needs before construction.

    Args:
        model_name: Catalog name (e.g., "openai-gpt-4")

    Returns:
        Set of credential keys; empty if the model is unknown
    """
    llm = get_llm_settings(model_name)
    return llm.credential_fields if llm else set()


def get_embedding_credentials_fields(model_name: str) -> set:
    """Get the credential field names an embedding model needs; empty if unknown."""
    embedding = get_embedding_settings(model_name)
    return embedding.credential_fields if embedding else set()


def get_provider_template(provider: ModelProvider) -> ProviderTemplate:
    """Return the template for provider. Raises KeyError if not in the catalog."""
    return PROVIDER_TEMPLATES[provider]


def list_available_models() -> Dict[str, Dict[str, list]]:
    """Summarise the catalog per provider for display layers."""
    return {
        provider.value: {
            "llms": [llm.name for llm in template.llms],
            "embeddings": [
                {"name": e.name, "embedding_size": e.embedding_size}
                for e in template.embeddings
            ],
        }
        for provider, template in PROVIDER_TEMPLATES.items()
    }


def resolve_credentials(
    settings: ModelSettings,
    credentials: Optional[Mapping[str, Any]] = None,
) -> ModelSettings:
    """
    Return a copy of settings with credential placeholders filled in.

    Caller-supplied values win. An apiKey still unset afterwards is read
    from the provider's environment variable. Values are not validated.

    Args:
        settings: A catalog (or caller-built) settings entry
        credentials: Caller-supplied secrets keyed by credential field

    Returns:
        New settings object of the same type; the input is not modified
    """
    resolved = dict(settings.credentials)
    resolved.update(credentials or {})
    if "apiKey" in resolved and resolved["apiKey"] is None:
        resolved["apiKey"] = get_api_key(settings.provider)
    return replace(settings, credentials=resolved)


def load_llm(model_name: str, credentials: Optional[Mapping[str, Any]] = None) -> BaseLanguageModel:
    """
    Instantiate a catalog LLM by name.

    Raises:
        KeyError: If model_name is not in the catalog
        UnsupportedModelType: If the entry's type has no factory
    """
    settings = get_llm_settings(model_name)
    if settings is None:
        raise KeyError(f"Unknown LLM: {model_name}")
    return load_llm_from_config(resolve_credentials(settings, credentials))


def load_embedding(model_name: str, credentials: Optional[Mapping[str, Any]] = None) -> Embeddings:
    """
    Instantiate a catalog embedding model by name.

    Raises:
        KeyError: If model_name is not in the catalog
        UnsupportedEmbeddingType: If the entry's type has no factory
    """
    settings = get_embedding_settings(model_name)
    if settings is None:
        raise KeyError(f"Unknown embedding model: {model_name}")
    return load_embedding_from_config(resolve_credentials(settings, credentials))
