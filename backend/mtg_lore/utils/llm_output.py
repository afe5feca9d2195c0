# -*- coding: utf-8 -*-
"""
MTG Lore 查询 - 万智牌角色背景查询服务
MTG Lore Lookup - Magic: The Gathering Character Lore Service

Copyright © 2025-2026 MTG Lore Lookup Contributors
License: PolyForm Noncommercial License 1.0.0

模块说明 / Module Description:
  LLM输出解析工具 - 从LLM响应中提取JSON
  LLM Output Parsing Helpers - Extract a JSON payload from an LLM response.
"""

from __future__ import annotations

import json
from typing import Any, Iterable, Optional, Tuple


def parse_json_payload(text: Optional[str]) -> Tuple[Optional[Any], str]:
    """
    从LLM响应中解析JSON

    Parse a JSON payload from an LLM response.

    Tries, in order:
    1. Direct parsing of the full text
    2. The content of the fence, when the whole reply is one ```json ... ``` block

    Free text around a JSON object or around a fence is NOT accepted.
    Nesting too deep for the decoder counts as a parse failure.

    Args:
        text: LLM响应文本 / LLM response text

    Returns:
        元组 (数据, 错误消息) / Tuple of (data, error_message)
        - data: 解析后的JSON对象或None / Parsed data or None
        - error_message: 空字符串表示成功，否则为错误代码 / Empty string on success, error code otherwise

    Example:
        >>> parse_json_payload('{"key": "value"}')
        ({'key': 'value'}, '')
        >>> parse_json_payload('```json\\n{"key": "value"}\\n```')
        ({'key': 'value'}, '')
        >>> parse_json_payload('invalid')
        (None, 'json_parse_failed')
    """
    if text is None or not str(text).strip():
        return None, "empty_response"

    for candidate in _build_candidates(str(text)):
        try:
            return json.loads(candidate), ""
        except (ValueError, RecursionError):
            continue

    return None, "json_parse_failed"


def _build_candidates(text: str) -> Iterable[str]:
    """
    生成JSON解析候选字符串

    Build candidate strings for JSON parsing: the full text, then the content
    of the fence when the whole reply is exactly one fenced code block.
    """
    cleaned = text.strip()
    yield cleaned

    # Only "```json ... ```" with nothing outside the fence
    if not (cleaned.startswith("```") and cleaned.endswith("```")):
        return
    if cleaned.count("```") != 2:
        return

    segment = cleaned[3:-3].strip()
    lines = segment.splitlines()
    if lines and lines[0].strip().lower() in {"json", "jsonc"}:
        segment = "\n".join(lines[1:]).strip()
    if segment:
        yield segment
