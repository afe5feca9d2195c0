# -*- coding: utf-8 -*-
"""
MTG Lore 查询 - 万智牌角色背景查询服务
MTG Lore Lookup - Magic: The Gathering Character Lore Service

Copyright © 2025-2026 MTG Lore Lookup Contributors
License: PolyForm Noncommercial License 1.0.0

模块说明 / Module Description:
  应用级异常层次 - 每个异常携带 HTTP 状态码与面向用户的消息
  Application-level Exception Hierarchy - Each exception carries its HTTP status
  and the user-facing message. Internal detail stays in ``str(exc)`` for logs only.
"""


INVALID_NAME_MESSAGE = "Character name is required and must be a non-empty string"
INVALID_FORMAT_MESSAGE = "Received invalid data format from AI service"
PARSE_FAILED_MESSAGE = "Failed to parse AI response as JSON"
GENERIC_FAILURE_MESSAGE = "Failed to fetch character lore. Please try again."


class LoreLookupError(Exception):
    """
    业务错误的基类

    Base exception for all lore lookup business errors.

    Attributes:
        status_code (int): 映射的 HTTP 状态码 / HTTP status returned to the caller.
        public_message (str): 返回给调用方的消息 / Message returned to the caller.
    """

    status_code = 500
    public_message = GENERIC_FAILURE_MESSAGE


class InvalidCharacterNameError(LoreLookupError):
    """
    角色名无效

    Raised when ``characterName`` is missing, not a string, or blank.
    """

    status_code = 400
    public_message = INVALID_NAME_MESSAGE


class MisconfiguredError(LoreLookupError):
    """
    服务配置缺失

    Raised when the active provider's API key is not configured. Checked before
    any outbound call is attempted.
    """

    def __init__(self, provider_label: str):
        super().__init__(f"{provider_label} API key is not configured")
        self.public_message = f"{provider_label} API key is not configured on the server"


class LoreParseError(LoreLookupError):
    """
    提供商响应不是合法 JSON

    Raised when the provider reply cannot be parsed as JSON.
    """

    public_message = PARSE_FAILED_MESSAGE


class LoreShapeError(LoreLookupError):
    """
    JSON 结构不符合要求

    Raised when the parsed payload is not an object, misses a required field,
    or carries a relationship value outside the allowed set.
    """

    public_message = INVALID_FORMAT_MESSAGE


class ProviderError(LoreLookupError):
    """
    LLM调用失败异常

    Raised when the provider call itself fails (timeout, network, auth, quota,
    empty completion).

    Attributes:
        reason (str): 分类原因代码 / Classification reason code, for logs.
    """

    def __init__(self, message: str, reason: str = "unknown_error"):
        super().__init__(message)
        self.reason = reason
