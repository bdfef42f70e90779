# services/calendar_service.py

import calendar
import logging
from typing import Any, Dict, List, Optional, Tuple

from models import WritingUnit, keys
from services.base import FeatureService
from utils.datetime_utils import is_date_key, month_keys, parse_date_key

logger = logging.getLogger(__name__)

MONTH_NAMES = list(calendar.month_name)[1:]

class CalendarService(FeatureService):
    """Заметки по дням и сводка активности всех разделов за день"""

    # ===== ЗАМЕТКИ =====

    def notes(self) -> Dict[str, str]:
        return {k: v for k, v in self._read_dict(keys.CALENDAR_NOTES).items() if isinstance(v, str)}

    def note(self, day: str) -> str:
        return self.notes().get(day, "")

    def save_note(self, day: str, text: Optional[str]) -> bool:
        """Сохранить заметку дня; пустой текст удаляет заметку"""
        if not is_date_key(day):
            return False

        notes = self._read_dict(keys.CALENDAR_NOTES)
        text = (text or "").strip()
        if text:
            notes[day] = text
        elif day in notes:
            del notes[day]
        else:
            return True
        self.store.set(keys.CALENDAR_NOTES, notes)
        logger.info(f"🗓️ Заметка {day} {'сохранена' if text else 'удалена'}")
        return True

    # ===== МЕСЯЦ =====

    @staticmethod
    def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
        """Соседний месяц: (2024, 1, -1) -> (2023, 12)"""
        index = year * 12 + (month - 1) + delta
        return index // 12, index % 12 + 1

    def month(self, year: Optional[int] = None, month: Optional[int] = None) -> Dict[str, Any]:
        now = self.now()
        year = year or now.year
        month = month or now.month
        today = self.today()
        notes = self.notes()

        days = []
        for day in month_keys(year, month):
            days.append({
                "date": day,
                "day": parse_date_key(day).day,
                "is_today": day == today,
                "has_note": day in notes,
                "has_activity": bool(self._activity(day))
            })

        prev_year, prev_month = self.shift_month(year, month, -1)
        next_year, next_month = self.shift_month(year, month, 1)
        return {
            "year": year,
            "month": month,
            "title": f"{MONTH_NAMES[month - 1]} {year}",
            # Воскресенье = 0, как в сетке календаря
            "first_weekday": (calendar.weekday(year, month, 1) + 1) % 7,
            "days": days,
            "prev": {"year": prev_year, "month": prev_month},
            "next": {"year": next_year, "month": next_month}
        }

    # ===== СВОДКА ДНЯ =====

    def day_summary(self, day: str) -> Dict[str, Any]:
        return {
            "date": day,
            "note": self.note(day),
            "activity": self._activity(day)
        }

    def _activity(self, day: str) -> List[str]:
        summary = []

        sessions = self._bucket(keys.WRITING_SESSIONS, day)
        if sessions:
            total = sum(s.get("amount", 0) for s in sessions if isinstance(s, dict))
            try:
                unit = WritingUnit(self.store.get(keys.WRITING_TARGET_TYPE, WritingUnit.WORDS.value))
            except ValueError:
                unit = WritingUnit.WORDS
            summary.append(f"📝 {total} {unit.value} written")

        checked = self._bucket(keys.DAILY_CHECKED, day)
        if checked:
            summary.append(f"✅ {len(checked)} goal(s) completed")

        things = self._read_dict(keys.THREE_THINGS).get(day)
        if isinstance(things, list) and things:
            done = sum(1 for t in things if isinstance(t, dict) and t.get("done"))
            summary.append(f"⭐ {done}/3 things done")

        workouts = self._bucket(keys.FITNESS_WORKOUTS, day)
        if workouts:
            summary.append(f"💪 {len(workouts)} workout(s)")

        return summary

    def _bucket(self, key: str, day: str) -> List[Any]:
        bucket = self.store.get(key, {})
        if not isinstance(bucket, dict):
            return []
        items = bucket.get(day)
        return items if isinstance(items, list) else []
