# -*- coding: utf-8 -*-
"""
MTG Lore 查询 - 万智牌角色背景查询服务
MTG Lore Lookup - Magic: The Gathering Character Lore Service

Copyright © 2025-2026 MTG Lore Lookup Contributors
License: PolyForm Noncommercial License 1.0.0

模块说明 / Module Description:
  OpenAI LLM提供商适配器
  OpenAI Provider - Implements BaseLLMProvider for the Chat Completions API
"""

from typing import List, Dict, Any, Optional
from openai import AsyncOpenAI
from mtg_lore.llm_gateway.providers.base import BaseLLMProvider


class OpenAIProvider(BaseLLMProvider):
    """
    OpenAI API提供商 / OpenAI API provider

    The SDK's built-in retries are disabled; a failed call is terminal.

    Attributes:
        client (AsyncOpenAI): 异步 OpenAI 客户端 / Async OpenAI client instance.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        max_tokens: int = 1000,
        temperature: float = 0.3,
        timeout: Optional[float] = None
    ):
        super().__init__(api_key, model, max_tokens, temperature)
        self.client = AsyncOpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = False
    ) -> Dict[str, Any]:
        """
        发送聊天请求到 OpenAI / Send chat request to OpenAI

        Args:
            messages: 消息列表 / List of messages.
            temperature: 覆盖温度 / Override temperature.
            max_tokens: 覆盖token数 / Override max tokens.
            json_mode: 使用 ``response_format={"type": "json_object"}`` / Request JSON output.

        Returns:
            响应字典包含内容、使用统计等 / Response dict with content, usage, etc.
        """
        kwargs = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature if temperature is None else temperature,
            "max_tokens": max_tokens or self.max_tokens,
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        response = await self.client.chat.completions.create(**kwargs)

        choice = response.choices[0]
        usage = response.usage
        return {
            "content": choice.message.content,
            "usage": {
                "prompt_tokens": usage.prompt_tokens if usage else 0,
                "completion_tokens": usage.completion_tokens if usage else 0,
                "total_tokens": usage.total_tokens if usage else 0
            },
            "model": response.model,
            "finish_reason": choice.finish_reason
        }

    def get_provider_name(self) -> str:
        """获取提供商名称 / Get provider name."""
        return "openai"
