"""
Routers for each service.

The parolee and rabbit counter services run as separate applications,
so each gets its own top‑level router.  Mount points come from
settings, which is why the routers are built per application rather
than at import time.
"""

from fastapi import APIRouter

from rest_lab_api.app.core.config import Settings

from .endpoints import parolees, rabbit


def build_parolee_router(settings: Settings) -> APIRouter:
    router = APIRouter()
    router.include_router(parolees.router, prefix=settings.parolees_path, tags=["parolees"])
    return router


def build_rabbit_router(settings: Settings) -> APIRouter:
    router = APIRouter()
    router.include_router(rabbit.router, prefix=settings.rabbit_path, tags=["rabbit"])
    return router
