#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Momentum - Dashboard Dependencies
Провайдеры сервисов для роутеров FastAPI
"""

import logging

from fastapi import HTTPException, Request, status

from services import (
    ServiceManager, NavigationService, WritingService, GoalsService,
    CalendarService, ThreeThingsService, FitnessService
)

logger = logging.getLogger(__name__)

def get_service_manager(request: Request) -> ServiceManager:
    """Менеджер сервисов приложения; 503, пока загрузка не завершена"""
    manager = getattr(request.app.state, "services", None)
    if manager is None or not manager.initialized:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Сервисы еще не инициализированы"
        )
    return manager

def get_navigation_service(request: Request) -> NavigationService:
    return get_service_manager(request).navigation

def get_writing_service(request: Request) -> WritingService:
    return get_service_manager(request).writing

def get_goals_service(request: Request) -> GoalsService:
    return get_service_manager(request).goals

def get_calendar_service(request: Request) -> CalendarService:
    return get_service_manager(request).calendar

def get_three_things_service(request: Request) -> ThreeThingsService:
    return get_service_manager(request).three_things

def get_fitness_service(request: Request) -> FitnessService:
    return get_service_manager(request).fitness

def bad_request(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

def not_found(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
