# -*- coding: utf-8 -*-
"""
MTG Lore 查询 - 万智牌角色背景查询服务
MTG Lore Lookup - Magic: The Gathering Character Lore Service

Copyright © 2025-2026 MTG Lore Lookup Contributors
License: PolyForm Noncommercial License 1.0.0

模块说明 / Module Description:
  Anthropic (Claude) LLM提供商适配器
  Anthropic (Claude) Provider - Implements BaseLLMProvider for Claude API
"""

from typing import List, Dict, Any, Optional
from anthropic import AsyncAnthropic
from mtg_lore.llm_gateway.providers.base import BaseLLMProvider

# Claude has no response_format switch; JSON mode pre-fills the reply with "{"
JSON_PREFILL = "{"


class AnthropicProvider(BaseLLMProvider):
    """
    Anthropic API提供商 / Anthropic API provider for Claude models

    Handles system message extraction and proper message formatting for Claude.

    Attributes:
        client (AsyncAnthropic): 异步 Anthropic 客户端 / Async Anthropic client instance.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "claude-3-5-haiku-20241022",
        max_tokens: int = 1000,
        temperature: float = 0.3,
        timeout: Optional[float] = None
    ):
        super().__init__(api_key, model, max_tokens, temperature)
        self.client = AsyncAnthropic(api_key=api_key, timeout=timeout, max_retries=0)

    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = False
    ) -> Dict[str, Any]:
        """
        发送聊天请求到 Anthropic / Send chat request to Anthropic

        Extracts the system message, since Claude takes it as a separate
        parameter rather than inside the messages list.

        Args:
            messages: 消息列表 / List of messages.
            temperature: 覆盖温度 / Override temperature.
            max_tokens: 覆盖token数 / Override max tokens.
            json_mode: 以 "{" 预填充回复 / Pre-fill the assistant turn with "{".

        Returns:
            响应字典包含内容、使用统计等 / Response dict with content, usage, etc.
        """
        # ========================================================================
        # 提取系统消息（如存在） / Extract system message if present
        # ========================================================================
        system_message = None
        filtered_messages = []

        for msg in messages:
            if msg["role"] == "system":
                system_message = msg["content"]
            else:
                filtered_messages.append(msg)

        if json_mode:
            filtered_messages.append({"role": "assistant", "content": JSON_PREFILL})

        # ========================================================================
        # Anthropic API调用 / Anthropic API call
        # ========================================================================
        kwargs = {
            "model": self.model,
            "messages": filtered_messages,
            "temperature": self.temperature if temperature is None else temperature,
            "max_tokens": max_tokens or self.max_tokens
        }

        if system_message:
            kwargs["system"] = system_message

        response = await self.client.messages.create(**kwargs)

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        if json_mode:
            text = JSON_PREFILL + text

        return {
            "content": text,
            "usage": {
                "prompt_tokens": response.usage.input_tokens,
                "completion_tokens": response.usage.output_tokens,
                "total_tokens": response.usage.input_tokens + response.usage.output_tokens
            },
            "model": response.model,
            "finish_reason": response.stop_reason
        }

    def get_provider_name(self) -> str:
        """获取提供商名称 / Get provider name."""
        return "anthropic"
