"""
LLM gateway / 大模型网关
"""

from mtg_lore.config import Settings
from mtg_lore.exceptions import MisconfiguredError
from mtg_lore.llm_gateway.errors import classify_error
from mtg_lore.llm_gateway.providers import AnthropicProvider, BaseLLMProvider, OpenAIProvider


def create_provider(settings: Settings) -> BaseLLMProvider:
    """Build the provider selected by ``settings.llm_provider``."""
    api_key = settings.api_key
    if not api_key:
        raise MisconfiguredError(settings.provider_label)

    provider_cls = AnthropicProvider if settings.llm_provider == "anthropic" else OpenAIProvider
    return provider_cls(
        api_key=api_key,
        model=settings.model,
        max_tokens=settings.max_tokens,
        temperature=settings.temperature,
        timeout=settings.request_timeout,
    )


__all__ = ["BaseLLMProvider", "classify_error", "create_provider"]
