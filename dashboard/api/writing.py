from fastapi import APIRouter, Depends
from typing import Dict, Any

from services import WritingService
from shared.models import WritingTargetRequest, WritingSessionRequest
from ..dependencies import get_writing_service, bad_request, not_found

router = APIRouter(prefix="/api/writing", tags=["writing"])

@router.get("", response_model=Dict[str, Any])
async def get_writing_progress(writing: WritingService = Depends(get_writing_service)):
    """
    Прогресс письма за сегодня: цель, сумма сессий и процент
    """
    return writing.progress()

@router.put("/target", response_model=Dict[str, Any])
async def set_writing_target(payload: WritingTargetRequest,
                             writing: WritingService = Depends(get_writing_service)):
    if not writing.set_target(payload.target, payload.unit):
        raise bad_request("Цель должна быть не меньше 1, единица: words, minutes или pages")
    return writing.progress()

@router.post("/sessions", response_model=Dict[str, Any], status_code=201)
async def log_writing_session(payload: WritingSessionRequest,
                              writing: WritingService = Depends(get_writing_service)):
    session = writing.log_session(payload.amount)
    if session is None:
        raise bad_request("Объем сессии должен быть не меньше 1")
    return writing.progress()

@router.delete("/sessions/{index}", response_model=Dict[str, Any])
async def remove_writing_session(index: int, writing: WritingService = Depends(get_writing_service)):
    if not writing.remove_session(index):
        raise not_found(f"Сессия {index} не найдена")
    return writing.progress()
