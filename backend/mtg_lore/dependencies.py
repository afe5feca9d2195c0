# -*- coding: utf-8 -*-
"""
MTG Lore 查询 - 万智牌角色背景查询服务
MTG Lore Lookup - Magic: The Gathering Character Lore Service

Copyright © 2025-2026 MTG Lore Lookup Contributors
License: PolyForm Noncommercial License 1.0.0

模块说明 / Module Description:
  依赖工厂 - 从 app.state 取得配置和提供商实例
  Dependency Factories - Resolve settings and the provider from ``app.state``.

设计原则 / Design Principles:
  配置在 create_app() 中构建一次并存放在 app.state，Router 不读取环境变量。
  Settings are built once in create_app() and stored on app.state; routers never
  read the environment. Tests swap the provider by assigning app.state.llm_provider.
"""

from fastapi import Request

from mtg_lore.config import Settings
from mtg_lore.exceptions import MisconfiguredError
from mtg_lore.llm_gateway import BaseLLMProvider, create_provider
from mtg_lore.services.lore_service import LoreService


def get_settings(request: Request) -> Settings:
    """
    获取应用配置

    Get the settings attached to the running application.
    """
    return request.app.state.settings


def get_llm_provider(request: Request) -> BaseLLMProvider:
    """
    获取或创建提供商单例

    Get or lazily create the application's provider instance.

    Raises:
        MisconfiguredError: 当前提供商未配置API密钥 / Active provider has no API key.
    """
    settings = get_settings(request)
    if not settings.api_key:
        raise MisconfiguredError(settings.provider_label)

    provider = request.app.state.llm_provider
    if provider is None:
        provider = create_provider(settings)
        request.app.state.llm_provider = provider
    return provider


def get_lore_service(request: Request) -> LoreService:
    """
    创建 LoreService

    Build a LoreService bound to the application's settings and provider.
    """
    return LoreService(get_llm_provider(request), get_settings(request))
