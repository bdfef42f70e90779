#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Momentum - точка входа

Порядок запуска: конфигурация -> логирование -> загрузка документа в
кэш -> сервисы -> HTTP API.
"""

import argparse
import json
import logging
import sys

import uvicorn

from config import config
from utils.logger import setup_logging

logger = logging.getLogger(__name__)

def build_check_report(manager, app_config=config) -> dict:
    """Отчет о загруженном документе: конфигурация, здоровье, поля"""
    from models import keys

    loaded_keys = sorted(manager.data_service.keys())
    return {
        "config": app_config.to_dict(),
        "health": manager.health_check(),
        "keys": loaded_keys,
        "missing_keys": [key for key in keys.ALL_KEYS if key not in loaded_keys],
        "unknown_keys": [key for key in loaded_keys if key not in keys.ALL_KEYS]
    }

def run_check() -> int:
    """Однократная загрузка документа и вывод состояния сервисов"""
    from services import ServiceManager

    with ServiceManager(config) as manager:
        manager.initialize_services()
        report = build_check_report(manager)
    print(json.dumps(report, ensure_ascii=False, indent=2, default=str))
    return 0 if report["health"]["status"] != "error" else 1

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Запуск Momentum Dashboard')
    parser.add_argument('--port', type=int, default=config.server.port, help='Порт сервера')
    parser.add_argument('--host', default=config.server.host, help='Хост сервера')
    parser.add_argument('--check', action='store_true', help='Загрузить документ, вывести состояние и выйти')
    args = parser.parse_args(argv)

    setup_logging(config)
    logger.info(f"⚙️ Конфигурация: {config.to_dict()}")

    if args.check:
        return run_check()

    from dashboard.app import create_app

    logger.info(f"🌐 Dashboard доступен на: http://{args.host}:{args.port}")
    uvicorn.run(
        create_app(),
        host=args.host,
        port=args.port,
        log_config=None,
        access_log=config.server.debug_mode
    )
    return 0

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("👋 Momentum остановлен пользователем")
    except Exception as e:
        logger.error(f"💥 Фатальная ошибка: {e}")
        sys.exit(1)
