# services/goals_service.py

import logging
from typing import Any, Dict, List, Optional

from core.streaks import StreakState, StreakTracker
from models import Goal, keys, new_goal_id
from services.base import FeatureService, percent

logger = logging.getLogger(__name__)

class GoalsService(FeatureService):
    """
    Ежедневные цели-чеклист и серия дней, когда выполнены все цели

    Серия пересчитывается после каждого изменения отметок и при старте.
    """

    def __init__(self, store, clock=None, tz=None):
        super().__init__(store, clock=clock, tz=tz)
        self.streak_tracker = StreakTracker(store, keys.ACHIEVEMENT_STREAK)

    # ===== ЦЕЛИ =====

    def goals(self) -> List[Goal]:
        return [g for g in (Goal.from_dict(item) for item in self._read_list(keys.DAILY_GOALS)) if g is not None]

    def add_goal(self, text: str) -> Optional[Goal]:
        text = (text or "").strip()
        if not text:
            return None

        goals = self.goals()
        existing_ids = {g.id for g in goals}
        goal_id = new_goal_id()
        suffix = 0
        while goal_id in existing_ids:
            suffix += 1
            goal_id = f"{new_goal_id()}{suffix}"

        goal = Goal(id=goal_id, text=text)
        goals.append(goal)
        self.store.set(keys.DAILY_GOALS, [g.to_dict() for g in goals])
        logger.info(f"✅ Добавлена цель {goal.id}: {text}")
        return goal

    def remove_goal(self, goal_id: str) -> bool:
        goals = self.goals()
        remaining = [g for g in goals if g.id != goal_id]
        if len(remaining) == len(goals):
            return False
        self.store.set(keys.DAILY_GOALS, [g.to_dict() for g in remaining])

        all_checked = self._read_dict(keys.DAILY_CHECKED)
        day = self.today()
        bucket = self.checked(day)
        if goal_id in bucket:
            all_checked[day] = [x for x in bucket if x != goal_id]
            self.store.set(keys.DAILY_CHECKED, all_checked)

        logger.info(f"🗑️ Цель {goal_id} удалена")
        return True

    # ===== ОТМЕТКИ =====

    def checked(self, day: Optional[str] = None) -> List[str]:
        bucket = self._read_dict(keys.DAILY_CHECKED).get(day or self.today(), [])
        if not isinstance(bucket, list):
            return []
        return [str(goal_id) for goal_id in bucket]

    def toggle(self, goal_id: str) -> Optional[bool]:
        """
        Переключить отметку цели на сегодня.

        Возвращает новое состояние отметки или None для неизвестной цели.
        """
        if goal_id not in {g.id for g in self.goals()}:
            return None

        all_checked = self._read_dict(keys.DAILY_CHECKED)
        day = self.today()
        bucket = self.checked(day)
        if goal_id in bucket:
            bucket = [x for x in bucket if x != goal_id]
            is_checked = False
        else:
            bucket.append(goal_id)
            is_checked = True
        all_checked[day] = bucket
        self.store.set(keys.DAILY_CHECKED, all_checked)

        self.refresh_streak()
        return is_checked

    def all_done(self, day: Optional[str] = None) -> bool:
        goals = self.goals()
        # Отметки удаленных целей не учитываются
        checked = set(self.checked(day))
        return len(goals) > 0 and all(g.id in checked for g in goals)

    def progress(self) -> Dict[str, Any]:
        goals = self.goals()
        checked = set(self.checked())
        done = sum(1 for g in goals if g.id in checked)
        return {
            "date": self.today(),
            "goals": [dict(g.to_dict(), checked=g.id in checked) for g in goals],
            "checked": done,
            "total": len(goals),
            "percent": percent(done, len(goals)),
            "all_done": self.all_done(),
            "streak": self.streak().to_dict()
        }

    # ===== СЕРИЯ =====

    def streak(self) -> StreakState:
        return self.streak_tracker.current()

    def refresh_streak(self) -> StreakState:
        return self.streak_tracker.record(self.all_done(), self.today())
