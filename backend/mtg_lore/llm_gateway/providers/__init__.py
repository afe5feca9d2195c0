"""
LLM providers / 大模型提供商
"""

from .base import BaseLLMProvider
from .openai_provider import OpenAIProvider
from .anthropic_provider import AnthropicProvider

__all__ = ["BaseLLMProvider", "OpenAIProvider", "AnthropicProvider"]
