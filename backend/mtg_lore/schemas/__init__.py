"""
Schemas / 数据模型
"""

from .lore import ErrorResponse, HealthResponse, LoreRecord, LoreRequest, Relationship

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "LoreRecord",
    "LoreRequest",
    "Relationship",
]
