# database/base.py

"""
Контракт удаленного документа и общие исключения хранилищ

Документ - это один объект с фиксированным идентификатором, в котором
каждое логическое поле хранится как строка (JSON-текст). Хранилище не
интерпретирует содержимое полей.
"""

import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional

# ===== EXCEPTIONS =====

class StoreError(Exception):
    """Базовое исключение для ошибок хранилища"""
    pass

class RemoteUnavailable(StoreError):
    """Хранилище недоступно: сеть, авторизация, квота или поврежденный документ"""

    def __init__(self, message: str, operation: Optional[str] = None, key: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
        self.key = key

# ===== CONTRACT =====

class RemoteDocumentStore(ABC):
    """Удаленный документ: чтение всех полей и точечная запись одного поля"""

    document_id: str = "userData"

    @abstractmethod
    def load(self) -> Dict[str, str]:
        """
        Загрузить весь документ.

        Отсутствующий документ - это пустой словарь, а не ошибка.
        Ошибки транспорта и авторизации поднимаются как RemoteUnavailable.
        """

    @abstractmethod
    def merge_write(self, key: str, serialized_value: str) -> None:
        """Записать одно поле, не затрагивая остальные (без предварительного чтения)"""

    def describe(self) -> str:
        return f"{type(self).__name__}({self.document_id})"

class InMemoryDocumentStore(RemoteDocumentStore):
    """Документ в памяти процесса: для разработки и тестов"""

    def __init__(self, document_id: str = "userData", fields: Optional[Dict[str, str]] = None):
        self.document_id = document_id
        self._fields: Optional[Dict[str, str]] = dict(fields) if fields is not None else None
        self._lock = threading.Lock()

    def load(self) -> Dict[str, str]:
        with self._lock:
            return dict(self._fields) if self._fields is not None else {}

    def merge_write(self, key: str, serialized_value: str) -> None:
        with self._lock:
            if self._fields is None:
                self._fields = {}
            self._fields[key] = serialized_value

    def snapshot(self) -> Dict[str, str]:
        """Текущее содержимое документа (копия)"""
        with self._lock:
            return dict(self._fields or {})
