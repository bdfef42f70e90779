# services/data_service.py

import logging
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor, wait
from datetime import datetime
from typing import Any, Dict, List, Optional, Set

from core.codec import Raw, decode, serialize
from database.base import RemoteDocumentStore, RemoteUnavailable

logger = logging.getLogger(__name__)

class SyncedKeyValueCache:
    """
    Кэш в памяти поверх удаленного документа

    Возможности:
    - Однократная загрузка документа при старте
    - Синхронные get/set для всего приложения
    - Фоновая запись каждого поля в документ (write-behind)
    - Метрики и проверка состояния

    Память всегда главнее документа: ошибка записи логируется и
    никогда не откатывает значение, уже сохраненное set().
    """

    def __init__(self, document_store: RemoteDocumentStore, max_workers: int = 4,
                 flush_timeout: float = 10.0):
        self.document_store = document_store
        self.flush_timeout = flush_timeout

        # Кэш значений
        self._cache: Dict[str, Any] = {}
        self.cache_lock = threading.RLock()

        # Фоновые записи
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="momentum-write")
        self._pending: Set[Future] = set()
        self._pending_lock = threading.Lock()
        self._issued_versions: Dict[str, int] = {}
        self._key_locks: Dict[str, threading.Lock] = {}
        self._closed = False

        # Метрики и состояние
        self.initialized = False
        self.loaded = False
        self.load_error: Optional[str] = None
        self.raw_fields: List[str] = []
        self.last_write_time: Optional[float] = None
        self.total_operations = 0
        self.writes_completed = 0
        self.writes_superseded = 0
        self.failed_operations = 0

    # ===== ЗАГРУЗКА =====

    def initialize(self) -> bool:
        """
        Однократная загрузка документа в кэш.

        Никогда не бросает исключений: при недоступности хранилища кэш
        остается пустым и приложение продолжает работу.
        """
        if self.initialized:
            logger.warning("⚠️ Кэш уже инициализирован, повторная загрузка пропущена")
            return self.loaded
        self.initialized = True

        logger.info(f"🔧 Загрузка документа из {self.document_store.describe()}...")
        started = time.time()
        try:
            fields = self.document_store.load()
        except RemoteUnavailable as e:
            self.load_error = str(e)
            logger.error(f"❌ Хранилище недоступно, начинаем с пустыми данными: {e}")
            return False
        except Exception as e:
            self.load_error = str(e)
            logger.error(f"❌ Ошибка загрузки документа, начинаем с пустыми данными: {e}")
            return False

        with self.cache_lock:
            for key, text in fields.items():
                result = decode(text)
                if isinstance(result, Raw):
                    self.raw_fields.append(key)
                    logger.warning(f"⚠️ Поле '{key}' не разобрано как JSON, сохраняем текст: {result.error}")
                # Значения, записанные до загрузки, главнее загруженных
                self._cache.setdefault(key, result.value)

        self.loaded = True
        logger.info(f"✅ Загружено полей: {len(fields)} за {time.time() - started:.2f} с")
        return True

    # ===== ОСНОВНЫЕ МЕТОДЫ =====

    def get(self, key: str, fallback: Any = None) -> Any:
        """Значение из кэша или fallback без изменений"""
        with self.cache_lock:
            if key in self._cache:
                return self._cache[key]
            return fallback

    def set(self, key: str, value: Any) -> None:
        """Записать значение в кэш и отправить его в документ в фоне"""
        with self.cache_lock:
            self._cache[key] = value
            self.total_operations += 1

        try:
            text = serialize(value)
        except (TypeError, ValueError) as e:
            self._count("failed_operations")
            logger.error(f"❌ Значение '{key}' не сериализуется, запись в документ пропущена: {e}")
            return

        self._dispatch_write(key, text)

    def __contains__(self, key: str) -> bool:
        with self.cache_lock:
            return key in self._cache

    def keys(self) -> List[str]:
        with self.cache_lock:
            return list(self._cache.keys())

    # ===== ФОНОВАЯ ЗАПИСЬ =====

    def _dispatch_write(self, key: str, text: str) -> None:
        with self._pending_lock:
            if self._closed:
                logger.warning(f"⚠️ Кэш закрыт, '{key}' сохранен только в памяти")
                return
            version = self._issued_versions.get(key, 0) + 1
            self._issued_versions[key] = version
            self._key_locks.setdefault(key, threading.Lock())
            future = self._executor.submit(self._write_field, key, text, version)
            self._pending.add(future)
        future.add_done_callback(self._on_write_done)

    def _write_field(self, key: str, text: str, version: int) -> None:
        """Рабочий процесс записи одного поля"""
        with self._key_locks[key]:
            # Более новая запись того же ключа уже поставлена в очередь
            if version < self._issued_versions.get(key, 0):
                self._count("writes_superseded")
                logger.debug(f"⏭️ Запись '{key}' v{version} заменена более новой")
                return
            try:
                self.document_store.merge_write(key, text)
            except Exception as e:
                self._count("failed_operations")
                logger.error(f"❌ Не удалось сохранить '{key}' в документ: {e}")
                return

        with self._pending_lock:
            self.writes_completed += 1
            self.last_write_time = time.time()
        logger.debug(f"💾 Поле '{key}' сохранено в документ")

    def _count(self, counter: str) -> None:
        """Счетчики меняются из рабочих потоков"""
        with self._pending_lock:
            setattr(self, counter, getattr(self, counter) + 1)

    def _on_write_done(self, future: Future) -> None:
        with self._pending_lock:
            self._pending.discard(future)

    def pending_writes(self) -> int:
        with self._pending_lock:
            return len(self._pending)

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Дождаться завершения отправленных записей"""
        with self._pending_lock:
            pending = list(self._pending)
        if not pending:
            return True
        done, not_done = wait(pending, timeout=timeout if timeout is not None else self.flush_timeout)
        if not_done:
            logger.warning(f"⚠️ Не завершено записей: {len(not_done)}")
        return not not_done

    # ===== МЕТРИКИ =====

    def get_service_metrics(self) -> Dict[str, Any]:
        """Метрики кэша и фоновых записей"""
        return {
            "keys": len(self.keys()),
            "loaded": self.loaded,
            "load_error": self.load_error,
            "raw_fields": list(self.raw_fields),
            "total_operations": self.total_operations,
            "writes_completed": self.writes_completed,
            "writes_superseded": self.writes_superseded,
            "failed_operations": self.failed_operations,
            "pending_writes": self.pending_writes(),
            "last_write": datetime.fromtimestamp(self.last_write_time).isoformat() if self.last_write_time else None
        }

    def health_check(self) -> Dict[str, Any]:
        """Проверка состояния кэша"""
        checks = {
            "initialized": {"status": "healthy" if self.initialized else "error"},
            "remote_load": {"status": "healthy" if self.loaded else "warning", "error": self.load_error},
            "writes": {
                "status": "warning" if self.failed_operations else "healthy",
                "failed": self.failed_operations,
                "pending": self.pending_writes()
            }
        }
        statuses = [check["status"] for check in checks.values()]
        status = "healthy"
        if "error" in statuses:
            status = "error"
        elif "warning" in statuses:
            status = "warning"
        return {
            "status": status,
            "timestamp": datetime.now().isoformat(),
            "checks": checks
        }

    def close(self):
        """Корректное закрытие: дождаться записей и остановить пул"""
        logger.info("🛑 Закрытие кэша...")
        if not self.flush():
            logger.warning("⚠️ Часть фоновых записей может быть потеряна")
        with self._pending_lock:
            self._closed = True
        self._executor.shutdown(wait=False)
        logger.info("✅ Кэш закрыт")

    def __enter__(self):
        """Context manager вход"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager выход"""
        self.close()

# ===== ГЛОБАЛЬНЫЙ ЭКЗЕМПЛЯР =====

_global_data_service: Optional[SyncedKeyValueCache] = None

def get_data_service() -> Optional[SyncedKeyValueCache]:
    """Получить глобальный экземпляр кэша (None до инициализации)"""
    return _global_data_service

def initialize_data_service(document_store: RemoteDocumentStore, max_workers: int = 4,
                            flush_timeout: float = 10.0) -> SyncedKeyValueCache:
    """Создать и загрузить глобальный кэш"""
    global _global_data_service
    if _global_data_service is not None:
        _global_data_service.close()
    _global_data_service = SyncedKeyValueCache(document_store, max_workers=max_workers,
                                               flush_timeout=flush_timeout)
    _global_data_service.initialize()
    return _global_data_service

def close_data_service():
    """Закрытие глобального кэша"""
    global _global_data_service
    if _global_data_service:
        _global_data_service.close()
        _global_data_service = None
