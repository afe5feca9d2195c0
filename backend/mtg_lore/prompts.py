"""
Prompt templates / 提示词模板
"""

from dataclasses import dataclass

from mtg_lore.schemas.lore import Relationship

RELATIONSHIP_VALUES = ", ".join(r.value for r in Relationship)
_RELATIONSHIP_PATTERN = " | ".join(r.value for r in Relationship)

LORE_SYSTEM_PROMPT = f"""You are an expert on Magic: The Gathering lore. When asked about a character, you must respond with ONLY valid JSON matching this exact schema:

{{
  "name": "string",
  "plane": "string",
  "affiliations": ["strings"],
  "summary": "2-3 sentence summary of their lore and story arc",
  "nahiri_relationship": "{_RELATIONSHIP_PATTERN}",
  "aurelia_relationship": "{_RELATIONSHIP_PATTERN}"
}}

Rules:
- No extra fields.
- No markdown.
- No commentary.
- Output valid JSON only.
- Relationship fields must contain exactly one of the allowed values: {RELATIONSHIP_VALUES}.
- Use snake_case for relationship enum values.
- Avoid using emojis or special characters in the response."""


@dataclass(frozen=True)
class PromptPair:
    system: str
    user: str


def lore_user_prompt(character_name: str) -> str:
    return f"Provide the lore for the Magic: The Gathering character: {character_name}"


def lore_prompt(character_name: str) -> PromptPair:
    """Build the system/user prompt pair for one character lookup."""
    return PromptPair(system=LORE_SYSTEM_PROMPT, user=lore_user_prompt(character_name))
