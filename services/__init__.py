# services/__init__.py

"""
Модуль сервисов Momentum

Кэш документа и сервисы функций, которые читают и пишут только через него.
"""

import logging
from typing import Optional

from database import RemoteDocumentStore, create_document_store
from .data_service import SyncedKeyValueCache, get_data_service, initialize_data_service, close_data_service
from .navigation_service import NavigationService
from .writing_service import WritingService
from .goals_service import GoalsService
from .calendar_service import CalendarService
from .three_things_service import ThreeThingsService
from .fitness_service import FitnessService

logger = logging.getLogger(__name__)

class ServiceManager:
    """
    Менеджер для управления всеми сервисами

    Обеспечивает:
    - Загрузку документа в кэш до создания сервисов функций
    - Передачу кэша каждому сервису явно
    - Корректное закрытие с ожиданием фоновых записей
    """

    def __init__(self, app_config=None, document_store: Optional[RemoteDocumentStore] = None, clock=None):
        if app_config is None:
            from config import config as app_config
        self.config = app_config
        self.document_store = document_store
        self.clock = clock

        self.data_service: Optional[SyncedKeyValueCache] = None
        self.navigation: Optional[NavigationService] = None
        self.writing: Optional[WritingService] = None
        self.goals: Optional[GoalsService] = None
        self.calendar: Optional[CalendarService] = None
        self.three_things: Optional[ThreeThingsService] = None
        self.fitness: Optional[FitnessService] = None
        self.initialized = False

    def initialize_services(self) -> bool:
        """Инициализация всех сервисов; False, если документ загрузить не удалось"""
        logger.info("🔧 Инициализация сервисов Momentum...")

        # 1. Хранилище документа и кэш (единственная блокирующая загрузка)
        if self.document_store is None:
            self.document_store = create_document_store(self.config)
        self.data_service = initialize_data_service(
            self.document_store,
            max_workers=self.config.storage.max_workers,
            flush_timeout=self.config.storage.flush_timeout_seconds
        )

        # 2. Сервисы функций (зависят от кэша)
        options = {"clock": self.clock, "tz": self.config.timezone}
        self.navigation = NavigationService(self.data_service, **options)
        self.writing = WritingService(self.data_service, **options)
        self.goals = GoalsService(self.data_service, **options)
        self.calendar = CalendarService(self.data_service, **options)
        self.three_things = ThreeThingsService(self.data_service, **options)
        self.fitness = FitnessService(self.data_service, **options)

        # 3. Серии пересчитываются при старте, как при открытии разделов
        self.goals.refresh_streak()
        self.fitness.refresh_streak()

        self.initialized = True
        if self.data_service.loaded:
            logger.info("✅ Все сервисы инициализированы успешно!")
        else:
            logger.warning("⚠️ Сервисы работают с пустыми данными: документ недоступен")
        return self.data_service.loaded

    def health_check(self) -> dict:
        """Проверка состояния всех сервисов"""
        if not self.data_service:
            return {"status": "error", "services": {}}
        data_health = self.data_service.health_check()
        return {
            "status": data_health["status"],
            "services": {"data_service": data_health}
        }

    def close_services(self):
        """Закрытие всех сервисов"""
        logger.info("🛑 Закрытие сервисов...")
        if self.data_service:
            if get_data_service() is self.data_service:
                close_data_service()
            else:
                self.data_service.close()
            self.data_service = None
        self.initialized = False
        logger.info("✅ Все сервисы закрыты")

    def __enter__(self):
        """Context manager вход"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager выход"""
        self.close_services()

__all__ = [
    'SyncedKeyValueCache',
    'ServiceManager',
    'NavigationService',
    'WritingService',
    'GoalsService',
    'CalendarService',
    'ThreeThingsService',
    'FitnessService',
    'get_data_service',
    'initialize_data_service',
    'close_data_service'
]
