# database/manager.py

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict

from .base import RemoteDocumentStore, RemoteUnavailable

logger = logging.getLogger(__name__)

class JsonFileDocumentStore(RemoteDocumentStore):
    """
    Документ в JSON-файле на диске: {"ключ": "JSON-текст", ...}

    Используется для локальной установки без Google Sheets.
    Запись атомарная: временный файл + replace.
    """

    def __init__(self, path: Path, document_id: str = "userData"):
        self.path = Path(path)
        self.document_id = document_id
        self._lock = threading.Lock()

    def load(self) -> Dict[str, str]:
        with self._lock:
            return self._read()

    def merge_write(self, key: str, serialized_value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = serialized_value
            self._write(data)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise RemoteUnavailable(f"Не удалось прочитать {self.path}: {e}", operation="load") from e

        if not isinstance(data, dict):
            raise RemoteUnavailable(f"Неверный формат документа {self.path}", operation="load")
        return {str(k): v if isinstance(v, str) else json.dumps(v, ensure_ascii=False) for k, v in data.items()}

    def _write(self, data: Dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", dir=str(self.path.parent))
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise RemoteUnavailable(f"Не удалось записать {self.path}: {e}", operation="merge_write") from e
        logger.debug(f"💾 Документ сохранен: {self.path}")
