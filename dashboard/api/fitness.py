from fastapi import APIRouter, Depends
from typing import Dict, Any

from services import FitnessService
from shared.models import ExerciseTypeRequest, WorkoutRequest
from ..dependencies import get_fitness_service, bad_request, not_found

router = APIRouter(prefix="/api/fitness", tags=["fitness"])

def _fitness_view(fitness: FitnessService) -> Dict[str, Any]:
    return {
        "date": fitness.today(),
        "exercise_types": fitness.exercise_types(),
        "workouts": [w.to_dict() for w in fitness.workouts()],
        "week": fitness.week_chart(),
        "streak": fitness.streak().to_dict()
    }

@router.get("", response_model=Dict[str, Any])
async def get_fitness(fitness: FitnessService = Depends(get_fitness_service)):
    """
    Тренировки за сегодня, недельный график и серия
    """
    return _fitness_view(fitness)

@router.post("/types", response_model=Dict[str, Any], status_code=201)
async def add_exercise_type(payload: ExerciseTypeRequest,
                            fitness: FitnessService = Depends(get_fitness_service)):
    if not fitness.add_exercise_type(payload.name):
        raise bad_request("Тип упражнения пустой или уже существует")
    return {"exercise_types": fitness.exercise_types()}

@router.delete("/types/{name}", response_model=Dict[str, Any])
async def remove_exercise_type(name: str, fitness: FitnessService = Depends(get_fitness_service)):
    if not fitness.remove_exercise_type(name):
        raise not_found(f"Тип упражнения {name} не найден")
    return {"exercise_types": fitness.exercise_types()}

@router.post("/workouts", response_model=Dict[str, Any], status_code=201)
async def log_workout(payload: WorkoutRequest, fitness: FitnessService = Depends(get_fitness_service)):
    if fitness.log_workout(payload.type, payload.duration, payload.notes or "") is None:
        raise bad_request("Укажите тип упражнения и длительность не меньше 1 минуты")
    return _fitness_view(fitness)

@router.delete("/workouts/{index}", response_model=Dict[str, Any])
async def remove_workout(index: int, fitness: FitnessService = Depends(get_fitness_service)):
    if not fitness.remove_workout(index):
        raise not_found(f"Тренировка {index} не найдена")
    return _fitness_view(fitness)
