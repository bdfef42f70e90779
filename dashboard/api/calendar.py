from fastapi import APIRouter, Depends, Query
from typing import Dict, Any, Optional

from services import CalendarService
from shared.models import NoteRequest
from utils.datetime_utils import is_date_key
from ..dependencies import get_calendar_service, bad_request

router = APIRouter(prefix="/api/calendar", tags=["calendar"])

@router.get("", response_model=Dict[str, Any])
async def get_month(
    calendar: CalendarService = Depends(get_calendar_service),
    year: Optional[int] = Query(None, ge=1970, le=9999),
    month: Optional[int] = Query(None, ge=1, le=12)
):
    """
    Дни месяца с отметками заметок и активности (по умолчанию текущий месяц)
    """
    return calendar.month(year, month)

@router.get("/{day}", response_model=Dict[str, Any])
async def get_day(day: str, calendar: CalendarService = Depends(get_calendar_service)):
    if not is_date_key(day):
        raise bad_request("Дата должна быть в формате YYYY-MM-DD")
    return calendar.day_summary(day)

@router.put("/{day}/note", response_model=Dict[str, Any])
async def save_note(day: str, payload: NoteRequest,
                    calendar: CalendarService = Depends(get_calendar_service)):
    if not calendar.save_note(day, payload.text):
        raise bad_request("Дата должна быть в формате YYYY-MM-DD")
    return calendar.day_summary(day)
