#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Серии (streak) последовательных дней выполнения

Один алгоритм для целей-чеклиста и для фитнеса; у каждой области
собственное сохраненное состояние в кэше.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from utils.datetime_utils import shift_key, is_date_key

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class StreakState:
    """Состояние серии"""
    count: int = 0
    last_date: Optional[str] = None

    def __post_init__(self):
        if self.count < 0:
            raise ValueError("count не может быть отрицательным")

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в словарь (формат поля документа)"""
        return {"count": self.count, "lastDate": self.last_date}

    @classmethod
    def from_dict(cls, data: Any) -> 'StreakState':
        """Десериализация; поврежденные данные дают пустую серию"""
        if not isinstance(data, dict):
            return cls()
        count = data.get("count", 0)
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            count = 0
        last_date = data.get("lastDate")
        if not is_date_key(last_date):
            last_date = None
        return cls(count=count, last_date=last_date)

def update_streak(state: StreakState, completed_today: bool, today_key: str) -> StreakState:
    """
    Обновить серию для дня today_key.

    Серия растет только в день, отмеченный выполненным: пропуск дня
    обнаруживается при следующем выполнении и начинает серию заново с 1.
    Повторный вызов в тот же день ничего не меняет.
    """
    if not completed_today:
        return state

    yesterday_key = shift_key(today_key, -1)

    if state.last_date == today_key:
        return state
    if state.last_date == yesterday_key or state.count == 0:
        return replace(state, count=state.count + 1, last_date=today_key)
    return StreakState(count=1, last_date=today_key)

class StreakTracker:
    """Серия, привязанная к ключу кэша (achievementStreak, fitnessStreak)"""

    def __init__(self, store, key: str):
        self.store = store
        self.key = key

    def current(self) -> StreakState:
        return StreakState.from_dict(self.store.get(self.key))

    def record(self, completed_today: bool, today_key: str) -> StreakState:
        state = self.current()
        updated = update_streak(state, completed_today, today_key)
        if updated != state:
            self.store.set(self.key, updated.to_dict())
            logger.info(f"🔥 Серия {self.key}: {updated.count} (день {today_key})")
        return updated
