"""
LLM factories backed by langchain_openai.

Each registered type tag maps to a factory taking client keyword arguments.
Catalog entries keep their own argument names (modelName, maxTokens, apiKey);
build_client_kwargs translates them to the LangChain keyword names.
"""

from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping
import re

from langchain_core.language_models import BaseLanguageModel
from langchain_openai import ChatOpenAI, OpenAI
from loguru import logger

from model_registry.config import get_base_url
from model_registry.domain.errors import UnsupportedModelType
from model_registry.domain.models import LLMType, ModelSettings


# Catalog key -> LangChain keyword where plain snake_case isn't enough
_ARG_ALIASES = {
    "modelName": "model",
    "apiKey": "api_key",
    "openAIApiKey": "api_key",
}

# Acronym runs stay together: openAIApiBase -> open_ai_api_base
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")


def _to_snake_case(key: str) -> str:
    key = _ACRONYM_BOUNDARY.sub(r"\1_\2", key)
    return _CAMEL_BOUNDARY.sub(r"\1_\2", key).lower()


def build_client_kwargs(settings: ModelSettings) -> Dict[str, Any]:
    """
    Merge args and supplied credentials into client keyword arguments.

    Credentials still holding their None placeholder are left out so the
    client can fall back to its own defaults (e.g. OPENAI_API_KEY).

    Args:
        settings: A settings entry, typically with credentials resolved

    Returns:
        Keyword arguments for the client constructor
    """
    merged = dict(settings.args)
    merged.update({k: v for k, v in settings.credentials.items() if v is not None})

    kwargs = {_ARG_ALIASES.get(key, _to_snake_case(key)): value for key, value in merged.items()}

    base_url = get_base_url(settings.provider)
    if base_url and "base_url" not in kwargs:
        kwargs["base_url"] = base_url
    return kwargs


def _chat_openai(kwargs: Dict[str, Any]) -> BaseLanguageModel:
    return ChatOpenAI(**kwargs)


def _completion_openai(kwargs: Dict[str, Any]) -> BaseLanguageModel:
    return OpenAI(**kwargs)


# LLM/Chat models registry
LLM_FACTORIES: Mapping[LLMType, Callable[[Dict[str, Any]], BaseLanguageModel]] = MappingProxyType({
    LLMType.CHAT_COMPLETION: _chat_openai,
    LLMType.COMPLETION: _completion_openai,
})


def load_llm_from_config(settings: ModelSettings) -> BaseLanguageModel:
    """
    Instantiate the language model client described by settings.

    Args:
        settings: LLM settings with credentials merged in as needed

    Returns:
        A LangChain language model (ChatOpenAI or OpenAI)

    Raises:
        UnsupportedModelType: If no factory is registered for settings.type

    Client construction errors are not caught.
    """
    factory = LLM_FACTORIES.get(settings.type)
    if factory is None:
        logger.warning(f"No LLM factory for type {settings.type!r} ({settings.name})")
        raise UnsupportedModelType(settings.type)

    logger.debug(f"Loading LLM {settings.name} ({getattr(settings.type, 'value', settings.type)})")
    return factory(build_client_kwargs(settings))
