"""
Lore data models.
"""

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class Relationship(str, Enum):
    """Relationship of a character towards Nahiri or Aurelia."""

    ATTACK_ON_SIGHT = "attack_on_sight"
    ENEMIES = "enemies"
    NEUTRAL = "neutral"
    FRIENDS = "friends"
    LOVED_ONES = "loved_ones"


class LoreRequest(BaseModel):
    """Request body for a lore lookup."""

    character_name: Optional[StrictStr] = Field(
        default=None,
        alias="characterName",
        description="Magic: The Gathering character name",
    )


class LoreRecord(BaseModel):
    """
    Validated character lore.

    ``name``, ``plane`` and ``summary`` must be non-blank strings. Relationship
    fields are optional but restricted to :class:`Relationship`. Unknown fields
    are dropped.
    """

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(..., description="Character name")
    plane: StrictStr = Field(..., description="Home plane")
    affiliations: List[StrictStr] = Field(default_factory=list, description="Guilds, factions, groups")
    summary: StrictStr = Field(..., description="2-3 sentence lore summary")
    nahiri_relationship: Optional[Relationship] = Field(default=None, description="Relationship to Nahiri")
    aurelia_relationship: Optional[Relationship] = Field(default=None, description="Relationship to Aurelia")

    @field_validator("name", "plane", "summary")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("affiliations", mode="before")
    @classmethod
    def _null_affiliations(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("nahiri_relationship", "aurelia_relationship", mode="before")
    @classmethod
    def _normalize_relationship(cls, value: Any) -> Any:
        # "Loved Ones" / "attack-on-sight" -> snake_case
        if isinstance(value, str):
            return "_".join(value.strip().lower().replace("-", " ").split())
        return value


class ErrorResponse(BaseModel):
    """Error body returned on every failure path."""

    error: str


class HealthResponse(BaseModel):
    """Liveness probe response."""

    status: str = "ok"
