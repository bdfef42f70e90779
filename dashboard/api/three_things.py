from fastapi import APIRouter, Depends, Query
from typing import Dict, Any

from services import ThreeThingsService
from shared.models import ThreeThingsRequest
from ..dependencies import get_three_things_service, bad_request, not_found

router = APIRouter(prefix="/api/three-things", tags=["three-things"])

@router.get("", response_model=Dict[str, Any])
async def get_today(three_things: ThreeThingsService = Depends(get_three_things_service)):
    return three_things.today_view()

@router.put("", response_model=Dict[str, Any])
async def plan_today(payload: ThreeThingsRequest,
                     three_things: ThreeThingsService = Depends(get_three_things_service)):
    if three_things.plan_today(payload.first, payload.second, payload.third) is None:
        raise bad_request("Нужно заполнить все три дела")
    return three_things.today_view()

@router.post("/{index}/toggle", response_model=Dict[str, Any])
async def toggle_thing(index: int, three_things: ThreeThingsService = Depends(get_three_things_service)):
    if three_things.toggle(index) is None:
        raise not_found(f"Дело {index} не найдено")
    return three_things.today_view()

@router.delete("", response_model=Dict[str, Any])
async def reset_today(three_things: ThreeThingsService = Depends(get_three_things_service)):
    three_things.reset_today()
    return three_things.today_view()

@router.get("/archive", response_model=Dict[str, Any])
async def get_archive(
    three_things: ThreeThingsService = Depends(get_three_things_service),
    limit: int = Query(ThreeThingsService.ARCHIVE_DAYS, ge=1, le=365)
):
    """Прошлые дни, от новых к старым"""
    return {"days": three_things.archive(limit)}
