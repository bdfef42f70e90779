# services/fitness_service.py

import logging
from typing import Any, Dict, List, Optional

from core.streaks import StreakState, StreakTracker
from models import DEFAULT_EXERCISES, Workout, keys
from services.base import FeatureService
from utils.datetime_utils import format_time, parse_date_key, week_keys

logger = logging.getLogger(__name__)

DAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

class FitnessService(FeatureService):
    """
    Журнал тренировок

    Серия фитнеса считается по дням, в которых есть хотя бы одна
    тренировка, и хранится отдельно от серии целей.
    """

    def __init__(self, store, clock=None, tz=None):
        super().__init__(store, clock=clock, tz=tz)
        self.streak_tracker = StreakTracker(store, keys.FITNESS_STREAK)

    # ===== ТИПЫ УПРАЖНЕНИЙ =====

    def exercise_types(self) -> List[str]:
        return [str(t) for t in self._read_list(keys.FITNESS_EXERCISE_TYPES, DEFAULT_EXERCISES)]

    def add_exercise_type(self, name: str) -> bool:
        name = (name or "").strip()
        types = self.exercise_types()
        if not name or name in types:
            return False
        types.append(name)
        self.store.set(keys.FITNESS_EXERCISE_TYPES, types)
        logger.info(f"🏷️ Новый тип упражнения: {name}")
        return True

    def remove_exercise_type(self, name: str) -> bool:
        types = self.exercise_types()
        if name not in types:
            return False
        self.store.set(keys.FITNESS_EXERCISE_TYPES, [t for t in types if t != name])
        return True

    # ===== ТРЕНИРОВКИ =====

    def workouts(self, day: Optional[str] = None) -> List[Workout]:
        bucket = self._read_dict(keys.FITNESS_WORKOUTS).get(day or self.today(), [])
        if not isinstance(bucket, list):
            return []
        return [w for w in (Workout.from_dict(item) for item in bucket) if w is not None]

    def log_workout(self, exercise_type: str, duration: int, notes: str = "") -> Optional[Workout]:
        exercise_type = (exercise_type or "").strip()
        if not exercise_type:
            return None
        if isinstance(duration, bool) or not isinstance(duration, int) or duration < 1:
            return None

        # Свой тип упражнения сразу попадает в список
        self.add_exercise_type(exercise_type)

        workout = Workout(type=exercise_type, duration=duration,
                          notes=(notes or "").strip(), time=format_time(self.now()))
        all_workouts = self._read_dict(keys.FITNESS_WORKOUTS)
        day = self.today()
        bucket = all_workouts.get(day)
        if not isinstance(bucket, list):
            bucket = []
        bucket.append(workout.to_dict())
        all_workouts[day] = bucket
        self.store.set(keys.FITNESS_WORKOUTS, all_workouts)
        logger.info(f"💪 Тренировка: {exercise_type}, {duration} мин")

        self.refresh_streak()
        return workout

    def remove_workout(self, index: int) -> bool:
        all_workouts = self._read_dict(keys.FITNESS_WORKOUTS)
        day = self.today()
        bucket = all_workouts.get(day)
        if not isinstance(bucket, list) or not 0 <= index < len(bucket):
            return False
        bucket.pop(index)
        if bucket:
            all_workouts[day] = bucket
        else:
            del all_workouts[day]
        self.store.set(keys.FITNESS_WORKOUTS, all_workouts)

        self.refresh_streak()
        return True

    # ===== НЕДЕЛЯ =====

    def week_chart(self) -> Dict[str, Any]:
        """Минуты тренировок по дням текущей недели (с воскресенья)"""
        today = self.today()
        days = []
        for day in week_keys(today):
            minutes = sum(w.duration for w in self.workouts(day))
            days.append({
                "date": day,
                "label": DAY_LABELS[(parse_date_key(day).weekday() + 1) % 7],
                "minutes": minutes,
                "is_today": day == today
            })
        return {
            "days": days,
            "max_minutes": max(d["minutes"] for d in days),
            "total_minutes": sum(d["minutes"] for d in days)
        }

    # ===== СЕРИЯ =====

    def streak(self) -> StreakState:
        return self.streak_tracker.current()

    def refresh_streak(self) -> StreakState:
        return self.streak_tracker.record(bool(self.workouts()), self.today())
