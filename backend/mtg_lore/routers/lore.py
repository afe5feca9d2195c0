"""
Lore router.
"""

from fastapi import APIRouter, Request

from mtg_lore.dependencies import get_lore_service
from mtg_lore.exceptions import InvalidCharacterNameError
from mtg_lore.schemas.lore import ErrorResponse, LoreRecord, LoreRequest

router = APIRouter(prefix="/lore", tags=["lore"])


@router.post(
    "",
    response_model=LoreRecord,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_lore(payload: LoreRequest, request: Request):
    """Fetch lore for a Magic: The Gathering character."""
    character_name = (payload.character_name or "").strip()
    if not character_name:
        raise InvalidCharacterNameError("Blank or missing characterName")

    service = get_lore_service(request)
    return await service.fetch_lore(character_name)
