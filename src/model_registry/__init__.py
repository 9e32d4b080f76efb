__version__ = "0.1.0"
__author__ = "Model Registry Team"

# Main exports
from .config import (
    LOG_LEVEL,
    get_api_key,
    get_base_url,
    dump,
)

from .domain import (
    # Models
    ModelProvider,
    LLMType,
    EmbeddingType,
    ModelSettings,
    LLMSettings,
    EmbeddingSettings,
    ProviderTemplate,
    # Errors
    ModelRegistryError,
    UnsupportedModelType,
    UnsupportedEmbeddingType,
    # Catalog
    PROVIDER_TEMPLATES,
)

from .logging import setup_logger

from .infrastructure import (
    load_llm_from_config,
    load_embedding_from_config,
)

from .application import (
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
    # Version
    "__version__",
    "__author__",
    # Config
    "LOG_LEVEL",
    "get_api_key",
    "get_base_url",
    "dump",
    "setup_logger",
    # Domain
    "ModelProvider",
    "LLMType",
    "EmbeddingType",
    "ModelSettings",
    "LLMSettings",
    "EmbeddingSettings",
    "ProviderTemplate",
    "ModelRegistryError",
    "UnsupportedModelType",
    "UnsupportedEmbeddingType",
    "PROVIDER_TEMPLATES",
    # Infrastructure
    "load_llm_from_config",
    "load_embedding_from_config",
    # Application
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
