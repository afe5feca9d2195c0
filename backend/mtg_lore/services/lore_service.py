# -*- coding: utf-8 -*-
"""
MTG Lore 查询 - 万智牌角色背景查询服务
MTG Lore Lookup - Magic: The Gathering Character Lore Service

Copyright © 2025-2026 MTG Lore Lookup Contributors
License: PolyForm Noncommercial License 1.0.0

模块说明 / Module Description:
  角色背景服务 - 构建提示词、调用提供商、解析并校验返回的JSON
  Lore Service - Builds the prompt, calls the provider once, then parses and
  validates the returned JSON into a LoreRecord.

失败分类 / Failure classes:
  - LoreParseError: 响应不是JSON / reply is not JSON
  - LoreShapeError: JSON 结构不符 / JSON does not match the record shape
  - ProviderError: 调用本身失败或超时 / the call failed or timed out
"""

import asyncio
from typing import Any, Dict

from pydantic import ValidationError

from mtg_lore.config import Settings
from mtg_lore.exceptions import LoreParseError, LoreShapeError, ProviderError
from mtg_lore.llm_gateway import BaseLLMProvider, classify_error
from mtg_lore.prompts import lore_prompt
from mtg_lore.schemas.lore import LoreRecord
from mtg_lore.utils.llm_output import parse_json_payload
from mtg_lore.utils.logger import get_logger

logger = get_logger(__name__)


def validate_lore_payload(data: Any) -> LoreRecord:
    """
    校验解析后的数据 / Validate a parsed payload into a LoreRecord.

    Raises:
        LoreShapeError: 非对象、缺少必填字段或关系值非法
                        Not an object, missing/blank required field, or bad relationship value.
    """
    if not isinstance(data, dict):
        raise LoreShapeError(f"Expected a JSON object, got {type(data).__name__}")
    try:
        return LoreRecord.model_validate(data)
    except ValidationError as exc:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
        raise LoreShapeError(f"Invalid lore payload, bad fields: {', '.join(fields)}") from exc


class LoreService:
    """
    角色背景适配器 / Lore provider adapter

    Stateless apart from its collaborators; one instance can serve concurrent
    requests.

    Attributes:
        provider (BaseLLMProvider): 大模型提供商 / LLM provider.
        settings (Settings): 应用配置 / Application settings.
    """

    def __init__(self, provider: BaseLLMProvider, settings: Settings):
        self.provider = provider
        self.settings = settings

    async def fetch_lore(self, character_name: str) -> LoreRecord:
        """
        获取角色背景 / Fetch lore for one character.

        Args:
            character_name: 已校验并去除空白的角色名 / Validated, trimmed name.

        Returns:
            LoreRecord: 校验后的记录 / The validated record.

        Raises:
            ProviderError, LoreParseError, LoreShapeError
        """
        content = await self._complete(character_name)

        data, parse_error = parse_json_payload(content)
        if parse_error:
            raise LoreParseError(f"Provider reply is not JSON ({parse_error}): {content[:200]!r}")

        record = validate_lore_payload(data)
        logger.debug("Lore fetched for %r via %s", character_name, self.provider.get_provider_name())
        return record

    async def _complete(self, character_name: str) -> str:
        prompt = lore_prompt(character_name)
        messages = [
            {"role": "system", "content": prompt.system},
            {"role": "user", "content": prompt.user},
        ]

        # wait_for cancels the outbound call on expiry
        try:
            response: Dict[str, Any] = await asyncio.wait_for(
                self.provider.chat(
                    messages=messages,
                    temperature=self.settings.temperature,
                    max_tokens=self.settings.max_tokens,
                    json_mode=True,
                ),
                timeout=self.settings.request_timeout,
            )
        except asyncio.TimeoutError as exc:
            raise ProviderError(
                f"Provider call timed out after {self.settings.request_timeout}s",
                reason="timeout_error",
            ) from exc
        except Exception as exc:
            raise ProviderError(
                f"Provider call failed: {type(exc).__name__}: {exc}",
                reason=classify_error(exc),
            ) from exc

        content = str(response.get("content") or "")
        if not content.strip():
            raise ProviderError(
                f"Provider returned an empty completion (finish_reason={response.get('finish_reason')})",
                reason="empty_response",
            )
        return content
