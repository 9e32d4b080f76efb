"""
Core domain models for the model registry.

Defines providers, model type tags, settings entries and provider templates.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Tuple, Union


class ModelProvider(str, Enum):
    """Vendor supplying model implementations."""
    OPENAI = "OpenAI"


class LLMType(str, Enum):
    """Language model client types."""
    CHAT_COMPLETION = "chat-completion"
    COMPLETION = "completion"


class EmbeddingType(str, Enum):
    """Embedding model client types."""
    EMBEDDING = "embedding"


@dataclass(frozen=True)
class ModelSettings:
    """
    One catalog entry describing a concrete model offering.

    Attributes:
        type: Type tag selecting the client factory
        provider: Owning provider
        name: Unique human-readable name, used as the lookup key
        args: Construction arguments passed to the client
        credentials: Credential field names mapped to placeholder values
    """
    type: Union[LLMType, EmbeddingType, str]
    provider: ModelProvider
    name: str
    args: Mapping[str, Any] = field(default_factory=dict, hash=False)
    credentials: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        if not self.name:
            raise ValueError("Model name cannot be empty")
        # Read-only views so catalog entries can't be edited in place
        object.__setattr__(self, "args", MappingProxyType(dict(self.args)))
        object.__setattr__(self, "credentials", MappingProxyType(dict(self.credentials)))

    @property
    def credential_fields(self) -> set:
        return set(self.credentials)


@dataclass(frozen=True)
class LLMSettings(ModelSettings):
    """Settings for a language model (chat or completion style)."""


@dataclass(frozen=True)
class EmbeddingSettings(ModelSettings):
    """
    Settings for an embedding model.

    Attributes:
        embedding_size: Dimensionality of the output vectors
    """
    embedding_size: int = 0

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.embedding_size, int) or self.embedding_size <= 0:
            raise ValueError(
                f"Embedding size must be a positive integer, got {self.embedding_size!r} for {self.name}"
            )


@dataclass(frozen=True)
class ProviderTemplate:
    """All model settings belonging to one provider."""
    provider: ModelProvider
    llms: Tuple[LLMSettings, ...] = ()
    embeddings: Tuple[EmbeddingSettings, ...] = ()
