#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Momentum - Configuration
Централизованная конфигурация с валидацией

Все параметры читаются из переменных окружения при создании AppConfig.
"""

import os
import sys
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass
from enum import Enum

import pytz

class Environment(Enum):
    """Среды выполнения"""
    DEVELOPMENT = "development"
    PRODUCTION = "production"

class LogLevel(Enum):
    """Уровни логирования"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

class StorageBackend(Enum):
    """Доступные хранилища удаленного документа"""
    SHEETS = "sheets"
    JSON = "json"
    MEMORY = "memory"

@dataclass
class StorageConfig:
    """Конфигурация хранилища документа"""
    backend: StorageBackend
    document_id: str = "userData"
    google_sheet_id: Optional[str] = None
    google_credentials_file: str = "service_account.json"
    json_path: Optional[Path] = None
    max_workers: int = 4
    flush_timeout_seconds: float = 10.0

@dataclass
class ServerConfig:
    """Конфигурация HTTP сервера"""
    host: str = "127.0.0.1"
    port: int = 8080
    debug_mode: bool = False

class AppConfig:
    """Главный класс конфигурации"""

    def __init__(self):
        self.environment = Environment(os.getenv('ENVIRONMENT', 'development'))
        self._load_config()
        self._validate_config()

    def _load_config(self):
        """Загрузка конфигурации из переменных окружения"""

        # Директории
        self.data_dir = Path(os.getenv('DATA_DIR', 'data'))
        self.log_dir = Path(os.getenv('LOG_DIR', 'logs'))

        # Хранилище
        document_id = os.getenv('DOCUMENT_ID', 'userData')
        self.storage = StorageConfig(
            backend=StorageBackend(os.getenv('STORAGE_BACKEND', 'json').lower()),
            document_id=document_id,
            google_sheet_id=os.getenv('GOOGLE_SHEET_ID'),
            google_credentials_file=os.getenv('GOOGLE_CREDENTIALS_FILE', 'service_account.json'),
            json_path=self.data_dir / f"{document_id}.json",
            max_workers=int(os.getenv('MAX_WORKERS', 4)),
            flush_timeout_seconds=float(os.getenv('WRITE_FLUSH_TIMEOUT', 10))
        )

        # Сервер
        self.server = ServerConfig(
            host=os.getenv('HOST', '127.0.0.1'),
            port=int(os.getenv('PORT', 8080)),
            debug_mode=os.getenv('DEBUG_MODE', 'false').lower() == 'true'
        )

        # Часовой пояс для ключей дат (пусто = локальное время системы)
        self.timezone_name = os.getenv('TIMEZONE') or None

        # Логирование
        self.log_level = LogLevel(os.getenv('LOG_LEVEL', 'INFO').upper())
        self.log_to_file = os.getenv('LOG_TO_FILE', 'false').lower() == 'true'
        self.log_format = os.getenv(
            'LOG_FORMAT',
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        )

    def _validate_config(self):
        """Валидация конфигурации"""
        errors = []

        if self.storage.backend == StorageBackend.SHEETS and not self.storage.google_sheet_id:
            errors.append("STORAGE_BACKEND=sheets требует GOOGLE_SHEET_ID")

        if not self.storage.document_id.strip():
            errors.append("DOCUMENT_ID не может быть пустым")

        if self.storage.max_workers < 1:
            errors.append("MAX_WORKERS должен быть положительным числом")

        if self.storage.flush_timeout_seconds <= 0:
            errors.append("WRITE_FLUSH_TIMEOUT должен быть больше нуля")

        if self.timezone_name and self.timezone_name not in pytz.all_timezones_set:
            errors.append(f"Неизвестный часовой пояс TIMEZONE={self.timezone_name}")

        # Проверка портов
        if not 1024 <= self.server.port <= 65535:
            errors.append(f"Порт {self.server.port} вне допустимого диапазона (1024-65535)")

        if errors:
            raise ValueError("Ошибки конфигурации:\n" + "\n".join(f"• {error}" for error in errors))

    def ensure_directories(self):
        """Создание необходимых директорий"""
        directories = [self.data_dir]
        if self.log_to_file:
            directories.append(self.log_dir)

        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)

    @property
    def timezone(self):
        """Часовой пояс pytz или None для локального времени"""
        return pytz.timezone(self.timezone_name) if self.timezone_name else None

    def get_logging_config(self) -> Dict[str, Any]:
        """Получение конфигурации логирования"""
        handlers = ['console']
        if self.log_to_file:
            handlers.append('file')

        handler_configs = {
            'console': {
                'class': 'logging.StreamHandler',
                'level': self.log_level.value,
                'formatter': 'default',
                'stream': sys.stdout
            }
        }
        if self.log_to_file:
            handler_configs['file'] = {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': self.log_level.value,
                'formatter': 'default',
                'filename': str(self.log_dir / f"momentum_{self.environment.value}.log"),
                'maxBytes': 10485760,  # 10MB
                'backupCount': 5,
                'encoding': 'utf-8'
            }

        return {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': {
                    'format': self.log_format,
                    'datefmt': '%Y-%m-%d %H:%M:%S'
                }
            },
            'handlers': handler_configs,
            'loggers': {
                '': {
                    'level': self.log_level.value,
                    'handlers': handlers,
                    'propagate': False
                },
                'urllib3': {
                    'level': 'WARNING',
                    'handlers': handlers,
                    'propagate': False
                },
                'uvicorn.access': {
                    'level': 'WARNING',
                    'handlers': handlers,
                    'propagate': False
                }
            }
        }

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация конфигурации в словарь"""
        return {
            'environment': self.environment.value,
            'storage': {
                'backend': self.storage.backend.value,
                'document_id': self.storage.document_id,
                'google_sheet_id': self.storage.google_sheet_id[:6] + "..." if self.storage.google_sheet_id else None,  # Скрываем ID
                'max_workers': self.storage.max_workers
            },
            'server': {
                'host': self.server.host,
                'port': self.server.port,
                'debug_mode': self.server.debug_mode
            },
            'timezone': self.timezone_name or 'local',
            'log_level': self.log_level.value
        }

# Глобальный экземпляр конфигурации
config = AppConfig()

# Экспорт для использования в других модулях
__all__ = [
    'config',
    'AppConfig',
    'Environment',
    'LogLevel',
    'StorageBackend',
    'StorageConfig',
    'ServerConfig'
]
