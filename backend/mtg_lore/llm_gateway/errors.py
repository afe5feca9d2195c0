# -*- coding: utf-8 -*-
"""
MTG Lore 查询 - 万智牌角色背景查询服务
MTG Lore Lookup - Magic: The Gathering Character Lore Service

Copyright © 2025-2026 MTG Lore Lookup Contributors
License: PolyForm Noncommercial License 1.0.0

模块说明 / Module Description:
  LLM错误分类 - 为提供商失败打上原因代码，仅用于日志
  LLM Error Classification - Tags provider failures with a reason code for logging.
  Failures are never retried; the code only tells operators what went wrong.
"""

# Error message patterns for classification
# 用于分类的错误消息模式
# Checked in order; the first matching group wins.
REASON_PATTERNS = (
    ("auth_error", (
        "invalid_api_key",
        "invalid api key",
        "incorrect api key",
        "authentication",
        "unauthorized",
        "permission",
        "forbidden",
        "401",
        "403",
    )),
    ("quota_error", (
        "insufficient_quota",
        "quota",
        "billing",
        "rate limit",
        "rate_limit",
        "too many requests",
        "429",
    )),
    ("timeout_error", (
        "timeout",
        "timed out",
        "deadline",
    )),
    ("connection_error", (
        "connection",
        "network",
        "socket",
        "refused",
        "unreachable",
    )),
    ("server_error", (
        "server_error",
        "internal server",
        "bad gateway",
        "service unavailable",
        "overloaded",
        "500",
        "502",
        "503",
        "504",
    )),
    ("model_error", (
        "model_not_found",
        "model not found",
        "context_length_exceeded",
        "content_policy",
    )),
)


def classify_error(error: BaseException) -> str:
    """
    将提供商错误分类为原因代码

    Classify a provider error into a reason code.

    Exception type names are checked first, then the message patterns.

    Args:
        error: 要分类的异常 / The exception to classify

    Returns:
        原因代码 / Reason code, one of ``auth_error``, ``quota_error``,
        ``timeout_error``, ``connection_error``, ``server_error``,
        ``model_error`` or ``unknown_error``.

    Example:
        >>> classify_error(TimeoutError("Request timed out"))
        'timeout_error'
        >>> classify_error(ValueError("invalid_api_key"))
        'auth_error'
    """
    error_str = str(error).lower()
    error_type = type(error).__name__.lower()

    # Check exception type first
    # 首先检查异常类型
    if "timeout" in error_type:
        return "timeout_error"
    if any(t in error_type for t in ("connection", "network", "socket")):
        return "connection_error"
    if any(t in error_type for t in ("authentication", "permission")):
        return "auth_error"
    if "ratelimit" in error_type:
        return "quota_error"

    for reason, patterns in REASON_PATTERNS:
        if any(pattern in error_str for pattern in patterns):
            return reason

    return "unknown_error"
