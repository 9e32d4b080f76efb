"""
Infrastructure layer - external integrations.

Contains:
- llm_providers: LLM and embedding client factories
"""

from .llm_providers import load_llm_from_config, load_embedding_from_config

__all__ = [
    "load_llm_from_config",
    "load_embedding_from_config",
]
