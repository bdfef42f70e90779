# services/base.py

import copy
import math
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from utils.datetime_utils import now_local, date_key

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

class FeatureService:
    """
    Базовый класс сервисов функций

    Все чтения и записи идут только через кэш (get/set). Значения
    копируются при чтении, чтобы изменения попадали в кэш только через set().
    """

    def __init__(self, store, clock: Optional[Clock] = None, tz=None):
        self.store = store
        self._clock = clock or (lambda: now_local(tz))

    def now(self) -> datetime:
        return self._clock()

    def today(self) -> str:
        """Ключ сегодняшнего дня YYYY-MM-DD"""
        return date_key(self.now())

    def _read_dict(self, key: str) -> Dict[str, Any]:
        value = self.store.get(key, {})
        if not isinstance(value, dict):
            logger.warning(f"⚠️ Поле '{key}' имеет неверный формат ({type(value).__name__}), используем пустое")
            return {}
        return copy.deepcopy(value)

    def _read_list(self, key: str, default: Optional[List[Any]] = None) -> List[Any]:
        value = self.store.get(key, default if default is not None else [])
        if not isinstance(value, list):
            logger.warning(f"⚠️ Поле '{key}' имеет неверный формат ({type(value).__name__}), используем пустое")
            return list(default or [])
        return copy.deepcopy(value)

def percent(part: float, whole: float) -> int:
    """Процент с округлением половины вверх (0 при нулевом знаменателе)"""
    if not whole:
        return 0
    return math.floor(part / whole * 100 + 0.5)
