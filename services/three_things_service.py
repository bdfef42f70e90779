# services/three_things_service.py

import logging
from typing import Any, Dict, List, Optional

from models import RANKS, Thing, keys
from services.base import FeatureService
from utils.datetime_utils import format_date, is_date_key

logger = logging.getLogger(__name__)

class ThreeThingsService(FeatureService):
    """Три главных дела на сегодня и архив прошлых дней"""

    ARCHIVE_DAYS = 14

    def things(self, day: Optional[str] = None) -> List[Thing]:
        items = self._read_dict(keys.THREE_THINGS).get(day or self.today())
        if not isinstance(items, list):
            return []
        return [t for t in (Thing.from_dict(item) for item in items) if t is not None]

    def today_view(self) -> Dict[str, Any]:
        things = self.things()
        return {
            "date": self.today(),
            "planned": bool(things),
            "things": [dict(t.to_dict(), rank=RANKS[i] if i < len(RANKS) else RANKS[-1])
                       for i, t in enumerate(things)]
        }

    def plan_today(self, first: str, second: str, third: str) -> Optional[List[Thing]]:
        """Задать три дела на сегодня; все три обязательны"""
        texts = [(t or "").strip() for t in (first, second, third)]
        if not all(texts):
            return None

        things = [Thing(text=text) for text in texts]
        all_days = self._read_dict(keys.THREE_THINGS)
        all_days[self.today()] = [t.to_dict() for t in things]
        self.store.set(keys.THREE_THINGS, all_days)
        logger.info("⭐ Три дела на сегодня запланированы")
        return things

    def toggle(self, index: int) -> Optional[bool]:
        all_days = self._read_dict(keys.THREE_THINGS)
        day = self.today()
        items = all_days.get(day)
        if not isinstance(items, list) or not 0 <= index < len(items) or not isinstance(items[index], dict):
            return None
        items[index]["done"] = not items[index].get("done", False)
        self.store.set(keys.THREE_THINGS, all_days)
        return items[index]["done"]

    def reset_today(self) -> bool:
        all_days = self._read_dict(keys.THREE_THINGS)
        if self.today() not in all_days:
            return False
        del all_days[self.today()]
        self.store.set(keys.THREE_THINGS, all_days)
        return True

    def archive(self, limit: int = ARCHIVE_DAYS) -> List[Dict[str, Any]]:
        """Прошлые дни, от новых к старым, без сегодняшнего"""
        all_days = self._read_dict(keys.THREE_THINGS)
        today = self.today()
        # Только ключи дней YYYY-MM-DD
        days = sorted((d for d in all_days if d != today and is_date_key(d)), reverse=True)[:limit]
        result = []
        for day in days:
            things = self.things(day)
            result.append({
                "date": day,
                "label": format_date(day),
                "things": [t.to_dict() for t in things]
            })
        return result
