"""
Application layer - registry queries and use cases.

Contains:
- registry: model enumeration, credential lookups and loading by name
"""

from .registry import (
    get_all_llms,
    get_all_embeddings,
    get_llm_credentials_fields,
    get_embedding_credentials_fields,
    get_llm_settings,
    get_embedding_settings,
    get_provider_template,
    list_available_models,
    resolve_credentials,
    load_llm,
    load_embedding,
)

__all__ = [
    "get_all_llms",
    "get_all_embeddings",
    "get_llm_credentials_fields",
    "get_embedding_credentials_fields",
    "get_llm_settings",
    "get_embedding_settings",
    "get_provider_template",
    "list_available_models",
    "resolve_credentials",
    "load_llm",
    "load_embedding",
]
