from fastapi import APIRouter, Depends
from typing import Dict, Any

from services import NavigationService
from shared.models import NavigateRequest
from ..dependencies import get_navigation_service, bad_request

router = APIRouter(prefix="/api/navigation", tags=["navigation"])

@router.get("", response_model=Dict[str, Any])
async def get_active_section(navigation: NavigationService = Depends(get_navigation_service)):
    """Активный раздел дашборда"""
    return {"section": navigation.active_section().value}

@router.put("", response_model=Dict[str, Any])
async def navigate(payload: NavigateRequest,
                   navigation: NavigationService = Depends(get_navigation_service)):
    section = navigation.navigate(payload.section)
    if section is None:
        raise bad_request(f"Неизвестный раздел: {payload.section}")
    return {"section": section.value}
