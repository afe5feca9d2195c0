# -*- coding: utf-8 -*-
"""
MTG Lore 查询 - 万智牌角色背景查询服务
MTG Lore Lookup - Magic: The Gathering Character Lore Service

Copyright © 2025-2026 MTG Lore Lookup Contributors
License: PolyForm Noncommercial License 1.0.0

模块说明 / Module Description:
  应用配置 - 启动时从环境变量 / .env 构建一次，然后显式传递
  Application Settings - Built once at startup from the environment / .env file,
  then passed explicitly to the gateway and the provider adapter.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


PROVIDER_LABELS = {
    "openai": "OpenAI",
    "anthropic": "Anthropic",
}


class Settings(BaseSettings):
    """
    服务配置 / Service settings

    Field names map to upper-case environment variables
    (e.g. ``openai_api_key`` <- ``OPENAI_API_KEY``).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Provider selection / 提供商选择
    llm_provider: Literal["openai", "anthropic"] = "openai"

    # Credentials / 凭证
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None

    # Models / 模型
    openai_model: str = "gpt-4o-mini"
    anthropic_model: str = "claude-3-5-haiku-20241022"

    # Generation / 生成参数
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    max_tokens: int = Field(default=1000, gt=0)
    request_timeout: float = Field(default=30.0, gt=0)

    # Server / 服务器
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False
    log_dir: Optional[str] = None

    @property
    def provider_label(self) -> str:
        return PROVIDER_LABELS[self.llm_provider]

    @property
    def api_key(self) -> Optional[str]:
        """当前提供商的 API 密钥（空白视为未配置） / Credential of the active provider."""
        if self.llm_provider == "anthropic":
            key = self.anthropic_api_key
        else:
            key = self.openai_api_key
        key = (key or "").strip()
        return key or None

    @property
    def model(self) -> str:
        if self.llm_provider == "anthropic":
            return self.anthropic_model
        return self.openai_model


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    获取进程级配置单例

    Get the process-wide settings instance. Only the application factory and
    the entry point call this; everything else receives settings explicitly.
    """
    return Settings()
