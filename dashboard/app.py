#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Momentum Web Dashboard - FastAPI Application
JSON API поверх кэша документа: письмо, цели, календарь, три дела, фитнес
"""

import asyncio
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from services import ServiceManager
from shared.models import HealthCheck
from dashboard.api import routers

logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"

def create_app(manager: Optional[ServiceManager] = None) -> FastAPI:
    """Создание FastAPI приложения; manager по умолчанию строится из config"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Управление жизненным циклом приложения"""
        # Startup
        logger.info("🚀 Запуск Momentum Dashboard...")
        app.state.start_time = time.time()
        services = app.state.services
        if not services.initialized:
            # Единственная блокирующая загрузка: API отвечает только после нее
            await asyncio.to_thread(services.initialize_services)
        logger.info("✅ Dashboard готов к работе")

        yield

        # Shutdown
        logger.info("🛑 Остановка Dashboard...")
        await asyncio.to_thread(services.close_services)
        logger.info("✅ Ресурсы очищены")

    app = FastAPI(
        title="Momentum Dashboard",
        description="Письмо, ежедневные цели, календарь, три дела и фитнес",
        version=APP_VERSION,
        lifespan=lifespan
    )
    app.state.services = manager or ServiceManager()
    app.state.start_time = time.time()

    # ===== MIDDLEWARE =====

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        """Middleware для логирования запросов"""
        start_time = time.time()
        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(f"❌ Ошибка обработки запроса: {e} ({process_time:.3f}s)")
            return JSONResponse(status_code=500, content={"detail": "Internal server error"})

        process_time = time.time() - start_time
        logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.3f}s")
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response

    # ===== ROUTES =====

    for router in routers:
        app.include_router(router)

    @app.get("/health", response_model=HealthCheck)
    async def health_check(request: Request):
        """Проверка состояния кэша и фоновых записей"""
        health = request.app.state.services.health_check()
        return HealthCheck(
            status=health["status"],
            service="momentum-dashboard",
            version=APP_VERSION,
            timestamp=time.time(),
            checks=health["services"]
        )

    return app
