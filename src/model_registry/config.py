# Application configuration - loads from YAML config files.

from pathlib import Path
from typing import Any, Dict, Optional
import os
import yaml


# Project Paths

# Get project root (parent of src/model_registry/)
_PROJECT_ROOT = Path(__file__).parent.parent.parent
_CONFIG_DIR = _PROJECT_ROOT / "config"

# YAML Config Loading

def _load_yaml(filename: str) -> Dict[str, Any]:
    """Load a YAML config file."""
    filepath = _CONFIG_DIR / filename
    if not filepath.exists():
        return {}
    with open(filepath, "r") as f:
        return yaml.safe_load(f) or {}


def _get_nested(d: Dict, *keys, default=None):
    """Get nested dictionary value safely."""
    for key in keys:
        if isinstance(d, dict):
            d = d.get(key, default)
        else:
            return default
    return d if d is not None else default


# Load configs
_CONFIG = _load_yaml("config.yaml")

# Logging

LOG_LEVEL = os.getenv("LOG_LEVEL") or _get_nested(_CONFIG, "logging", "level", default="INFO")

# Provider Helpers

def _provider_key(provider: Any) -> str:
    # Enum members and plain strings both index the providers section
    return getattr(provider, "value", provider)


def get_api_key(provider: Any) -> Optional[str]:
    """Get API key for the specified provider from its environment variable."""
    key = _provider_key(provider)
    env_var = _get_nested(_CONFIG, "providers", key, "api_key_env",
                          default=f"{key.upper()}_API_KEY")
    return os.getenv(env_var)


def get_base_url(provider: Any) -> Optional[str]:
    """Get the API base URL override for a provider, if one is configured."""
    return _get_nested(_CONFIG, "providers", _provider_key(provider), "base_url")


def dump() -> None:
    """Print all active non-secret configuration values for debugging."""
    from model_registry.application.registry import list_available_models

    print("\n" + "=" * 60)
    print("CONFIGURATION (NON-SECRETS ONLY)")
    print("=" * 60)

    print("\n Logging:")
    print(f"   Level: {LOG_LEVEL}")

    print("\n Providers:")
    for provider, models in list_available_models().items():
        api_key_set = "yes" if get_api_key(provider) else "no"
        print(f"   {provider} (API key set: {api_key_set}, base URL: {get_base_url(provider) or 'default'})")
        for name in models["llms"]:
            print(f"      LLM: {name}")
        for embedding in models["embeddings"]:
            print(f"      Embedding: {embedding['name']} ({embedding['embedding_size']} dims)")

    print("\n" + "=" * 60 + "\n")


def get_config() -> Dict[str, Any]:
    """Return full config dictionary."""
    return _CONFIG
