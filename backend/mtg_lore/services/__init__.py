"""
Services / 服务层
"""

from .lore_service import LoreService, validate_lore_payload

__all__ = ["LoreService", "validate_lore_payload"]
