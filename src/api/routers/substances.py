"""API router for the banned substance registry."""

from typing import List

from fastapi import APIRouter, Query

from models.schemas import SubstanceCheckResponse, SubstanceResponse
from services.label_analysis import detect_banned_substances, get_substance_registry, substance_category

router = APIRouter()


@router.get("", response_model=List[SubstanceResponse])
async def list_substances() -> List[SubstanceResponse]:
    """List every banned substance with its category and aliases."""
    return [
        SubstanceResponse(name=entry.name, category=entry.category, aliases=list(entry.aliases))
        for entry in get_substance_registry()
    ]


@router.get("/check", response_model=SubstanceCheckResponse)
async def check_text(text: str = Query(..., description="Ingredient text to scan")) -> SubstanceCheckResponse:
    result = detect_banned_substances(text)
    return SubstanceCheckResponse(
        found=result.found,
        substances=list(result.substances),
        categories={name: substance_category(name) for name in result.substances},
    )
