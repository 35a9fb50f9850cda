"""
FastAPI dependencies giving handlers access to application state.

The stores are created by the application factories in ``main`` and
attached to ``app.state``; nothing here holds state of its own.
"""

from fastapi import Request

from rest_lab_api.app.core.config import Settings
from rest_lab_api.app.services.fibonacci_service import FibonacciService
from rest_lab_api.app.services.parolee_service import ParoleeService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_parolee_service(request: Request) -> ParoleeService:
    return request.app.state.parolee_service


def get_fibonacci_service(request: Request) -> FibonacciService:
    return request.app.state.fibonacci_service
