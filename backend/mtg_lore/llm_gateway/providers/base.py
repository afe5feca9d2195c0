# -*- coding: utf-8 -*-
"""
MTG Lore 查询 - 万智牌角色背景查询服务
MTG Lore Lookup - Magic: The Gathering Character Lore Service

Copyright © 2025-2026 MTG Lore Lookup Contributors
License: PolyForm Noncommercial License 1.0.0

模块说明 / Module Description:
  LLM提供商抽象基类 - 统一接口定义
  Base LLM Provider Abstract Class - Defines the unified interface for the
  OpenAI and Anthropic backends.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional


class BaseLLMProvider(ABC):
    """
    大模型提供商抽象基类 / Abstract base class for LLM providers

    Attributes:
        api_key (str): API密钥 / API key for authentication.
        model (str): 模型名称 / Model name/identifier.
        max_tokens (int): 最大生成token数 / Maximum tokens to generate.
        temperature (float): 生成温度 / Sampling temperature.
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        max_tokens: int = 1000,
        temperature: float = 0.3
    ):
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature

    @abstractmethod
    async def chat(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_mode: bool = False
    ) -> Dict[str, Any]:
        """
        发送聊天请求到LLM提供商 / Send chat request to LLM provider

        Args:
            messages: 消息列表，格式为 [{"role": "user", "content": "..."}]
                     Message list in format [{"role": "user", "content": "..."}]
            temperature: 覆盖默认温度 / Override temperature setting.
            max_tokens: 覆盖默认token限制 / Override max tokens setting.
            json_mode: 请求JSON格式输出 / Ask the provider to constrain output to JSON.

        Returns:
            响应字典 / Response dict. Expected keys:
            - content: 生成的文本 / Generated text
            - usage: token使用情况 / Token usage dict
            - model: 模型名称 / Model name
            - finish_reason: 完成原因 / Completion reason
        """
        pass

    @abstractmethod
    def get_provider_name(self) -> str:
        """获取提供商名称 / Get provider name (e.g., 'openai', 'anthropic')."""
        pass

    async def aclose(self) -> None:
        """释放底层客户端 / Release the underlying HTTP client."""
        client = getattr(self, "client", None)
        if client is not None:
            await client.close()
