# services/navigation_service.py

import logging
from typing import Optional

from models import Section, keys
from services.base import FeatureService

logger = logging.getLogger(__name__)

class NavigationService(FeatureService):
    """Активный раздел дашборда"""

    DEFAULT_SECTION = Section.WRITING

    def active_section(self) -> Section:
        value = self.store.get(keys.ACTIVE_SECTION, self.DEFAULT_SECTION.value)
        try:
            return Section(value)
        except ValueError:
            logger.warning(f"⚠️ Неизвестный раздел '{value}', открываем {self.DEFAULT_SECTION.value}")
            return self.DEFAULT_SECTION

    def navigate(self, section: str) -> Optional[Section]:
        """Переключить раздел; None для неизвестного раздела"""
        try:
            target = Section(section)
        except ValueError:
            return None
        self.store.set(keys.ACTIVE_SECTION, target.value)
        return target
