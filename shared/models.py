from pydantic import BaseModel, Field
from typing import Any, Dict, Optional

# Запросы API дашборда. Правила предметной области проверяют сервисы,
# здесь только форма запроса.

class NavigateRequest(BaseModel):
    section: str

class WritingTargetRequest(BaseModel):
    target: int
    unit: Optional[str] = None

class WritingSessionRequest(BaseModel):
    amount: int

class GoalRequest(BaseModel):
    text: str

class NoteRequest(BaseModel):
    text: Optional[str] = ""

class ThreeThingsRequest(BaseModel):
    first: str
    second: str
    third: str

class ExerciseTypeRequest(BaseModel):
    name: str

class WorkoutRequest(BaseModel):
    type: str
    duration: int
    notes: Optional[str] = ""

class HealthCheck(BaseModel):
    status: str
    service: str
    version: str
    timestamp: float
    checks: Dict[str, Any] = Field(default_factory=dict)

__all__ = [
    'NavigateRequest',
    'WritingTargetRequest',
    'WritingSessionRequest',
    'GoalRequest',
    'NoteRequest',
    'ThreeThingsRequest',
    'ExerciseTypeRequest',
    'WorkoutRequest',
    'HealthCheck'
]
