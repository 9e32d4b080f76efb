"""Registry error types."""

from typing import Any


class ModelRegistryError(ValueError):
    """Base class for errors raised by the model registry."""


class UnsupportedModelType(ModelRegistryError):
    """No LLM factory is registered for the settings' type tag."""

    def __init__(self, model_type: Any):
        self.model_type = model_type
        super().__init__(f"Loading {getattr(model_type, 'value', model_type)} type LLM not supported")


class UnsupportedEmbeddingType(ModelRegistryError):
    """No embedding factory is registered for the settings' type tag."""

    def __init__(self, model_type: Any):
        self.model_type = model_type
        super().__init__(f"Loading {getattr(model_type, 'value', model_type)} type Embedding not supported")
