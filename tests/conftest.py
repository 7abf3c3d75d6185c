# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides a fresh store and test client per test
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app
from core.services.user_service import UserService
from core.services.user_store import UserStore


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store():
    """A store holding the three seed users."""
    return UserStore.seeded()


@pytest.fixture
def service(store):
    """A user service bound to the seeded store."""
    return UserService(store)


@pytest.fixture
def static_dir(tmp_path):
    """A public directory with one text file in it."""
    public = tmp_path / "public"
    public.mkdir()
    (public / "prueba.txt").write_text("hola desde public")
    return public


@pytest.fixture
def test_settings(static_dir):
    """Development settings serving the temporary public directory."""
    return Settings(
        APP_NAME="Usuarios API - Test",
        DB_HOST="test-db-server",
        ENVIRONMENT="development",
        STATIC_DIR=str(static_dir),
    )


@pytest.fixture
def client(test_settings, store):
    """Test client for an app that owns the seeded store."""
    return TestClient(create_app(test_settings, store))


@pytest.fixture
def seed_users():
    """The seed collection as it appears on the wire."""
    return [
        {"id": 1, "nombre": "Intza"},
        {"id": 2, "nombre": "Alex"},
        {"id": 3, "nombre": "María"},
    ]
