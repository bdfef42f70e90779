from fastapi import APIRouter, Depends
from typing import Dict, Any

from services import GoalsService
from shared.models import GoalRequest
from ..dependencies import get_goals_service, bad_request, not_found

router = APIRouter(prefix="/api/goals", tags=["goals"])

@router.get("", response_model=Dict[str, Any])
async def get_goals(goals: GoalsService = Depends(get_goals_service)):
    """
    Цели, отметки за сегодня и серия дней с выполненными целями
    """
    return goals.progress()

@router.post("", response_model=Dict[str, Any], status_code=201)
async def add_goal(payload: GoalRequest, goals: GoalsService = Depends(get_goals_service)):
    goal = goals.add_goal(payload.text)
    if goal is None:
        raise bad_request("Текст цели не может быть пустым")
    return {"goal": goal.to_dict(), **goals.progress()}

@router.delete("/{goal_id}", response_model=Dict[str, Any])
async def remove_goal(goal_id: str, goals: GoalsService = Depends(get_goals_service)):
    if not goals.remove_goal(goal_id):
        raise not_found(f"Цель {goal_id} не найдена")
    return goals.progress()

@router.post("/{goal_id}/toggle", response_model=Dict[str, Any])
async def toggle_goal(goal_id: str, goals: GoalsService = Depends(get_goals_service)):
    checked = goals.toggle(goal_id)
    if checked is None:
        raise not_found(f"Цель {goal_id} не найдена")
    return {**goals.progress(), "goal_id": goal_id, "checked": checked}
