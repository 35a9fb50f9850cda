"""
Shared fixtures for the service tests.

Every test gets freshly built applications, so stores never leak
between tests.
"""

import pytest
from fastapi.testclient import TestClient

from rest_lab_api.app.core.config import Settings
from rest_lab_api.app.main import create_parolee_app, create_rabbit_app
from rest_lab_api.app.services.fibonacci_service import FibonacciService
from rest_lab_api.app.services.parolee_service import ParoleeService


@pytest.fixture
def settings():
    """Settings with default mount points."""
    return Settings(services_root="", rabbit_path="/rabbit")


@pytest.fixture
def parolee_service():
    return ParoleeService()


@pytest.fixture
def fibonacci_service():
    return FibonacciService()


@pytest.fixture
def parolee_client(settings, parolee_service):
    """Test client for a parolee app backed by ``parolee_service``."""
    return TestClient(create_parolee_app(settings, parolee_service))


@pytest.fixture
def rabbit_client(settings, fibonacci_service):
    """Test client for a rabbit counter app backed by ``fibonacci_service``."""
    return TestClient(create_rabbit_app(settings, fibonacci_service))
