"""
MTG Lore Lookup backend / 万智牌角色背景查询后端
"""

__version__ = "0.1.0"
