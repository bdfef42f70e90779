# services/writing_service.py

import logging
from typing import Any, Dict, List, Optional

from models import WritingSession, WritingUnit, keys
from services.base import FeatureService, percent
from utils.datetime_utils import format_time

logger = logging.getLogger(__name__)

class WritingService(FeatureService):
    """Ежедневная цель по письму: цель, единица и сессии по дням"""

    DEFAULT_TARGET = 1000
    DEFAULT_UNIT = WritingUnit.WORDS

    # ===== ЦЕЛЬ =====

    def target(self) -> int:
        value = self.store.get(keys.WRITING_TARGET, self.DEFAULT_TARGET)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 1:
            return self.DEFAULT_TARGET
        return int(value)

    def unit(self) -> WritingUnit:
        try:
            return WritingUnit(self.store.get(keys.WRITING_TARGET_TYPE, self.DEFAULT_UNIT.value))
        except ValueError:
            return self.DEFAULT_UNIT

    def set_target(self, value: int, unit: Optional[str] = None) -> bool:
        """Новая дневная цель; значения меньше 1 отклоняются"""
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            return False
        try:
            new_unit = WritingUnit(unit) if unit is not None else self.unit()
        except ValueError:
            return False

        self.store.set(keys.WRITING_TARGET, value)
        self.store.set(keys.WRITING_TARGET_TYPE, new_unit.value)
        logger.info(f"🎯 Цель по письму: {value} {new_unit.value}")
        return True

    # ===== СЕССИИ =====

    def sessions(self, day: Optional[str] = None) -> List[WritingSession]:
        bucket = self._read_dict(keys.WRITING_SESSIONS).get(day or self.today(), [])
        if not isinstance(bucket, list):
            return []
        return [s for s in (WritingSession.from_dict(item) for item in bucket) if s is not None]

    def log_session(self, amount: int) -> Optional[WritingSession]:
        if isinstance(amount, bool) or not isinstance(amount, int) or amount < 1:
            return None

        session = WritingSession(amount=amount, time=format_time(self.now()))
        all_sessions = self._read_dict(keys.WRITING_SESSIONS)
        day = self.today()
        bucket = all_sessions.get(day)
        if not isinstance(bucket, list):
            bucket = []
        bucket.append(session.to_dict())
        all_sessions[day] = bucket
        self.store.set(keys.WRITING_SESSIONS, all_sessions)
        logger.info(f"📝 Сессия письма: {amount} {self.unit().value}")
        return session

    def remove_session(self, index: int) -> bool:
        """Удалить сессию сегодняшнего дня по индексу"""
        all_sessions = self._read_dict(keys.WRITING_SESSIONS)
        day = self.today()
        bucket = all_sessions.get(day)
        if not isinstance(bucket, list) or not 0 <= index < len(bucket):
            return False
        bucket.pop(index)
        all_sessions[day] = bucket
        self.store.set(keys.WRITING_SESSIONS, all_sessions)
        return True

    # ===== ПРОГРЕСС =====

    def total(self, day: Optional[str] = None) -> int:
        return sum(s.amount for s in self.sessions(day))

    def today_total(self) -> int:
        return self.total()

    def progress(self) -> Dict[str, Any]:
        """Прогресс сегодняшнего дня в процентах (не больше 100)"""
        total = self.today_total()
        target = self.target()
        unit = self.unit()
        return {
            "date": self.today(),
            "total": total,
            "target": target,
            "unit": unit.value,
            "unit_label": unit.label,
            "percent": min(100, percent(total, target)),
            "sessions": [s.to_dict() for s in self.sessions()]
        }
