"""
Domain layer - registry data model.

Contains:
- models: Providers, type tags and settings dataclasses
- errors: Registry error types
- catalog: The static provider catalog
"""

from .models import (
    ModelProvider,
    LLMType,
    EmbeddingType,
    ModelSettings,
    LLMSettings,
    EmbeddingSettings,
    ProviderTemplate,
)
from .errors import ModelRegistryError, UnsupportedModelType, UnsupportedEmbeddingType
from .catalog import PROVIDER_TEMPLATES

__all__ = [
    # Models
    "ModelProvider",
    "LLMType",
    "EmbeddingType",
    "ModelSettings",
    "LLMSettings",
    "EmbeddingSettings",
    "ProviderTemplate",
    # Errors
    "ModelRegistryError",
    "UnsupportedModelType",
    "UnsupportedEmbeddingType",
    # Catalog
    "PROVIDER_TEMPLATES",
]
