"""API router registrations."""

from __future__ import annotations

from fastapi import APIRouter

from . import auth, categories, health, reports, tasks, users

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(tasks.router)
api_router.include_router(categories.router)
api_router.include_router(users.router)
api_router.include_router(reports.router)

health_router = health.router
tasks_router = tasks.router

__all__ = ["api_router", "health_router", "tasks_router"]
