# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Usuarios API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_validation.py: Client-facing validation messages
# - test_user_store.py / test_user_service.py: In-memory CRUD logic
# - test_users_api.py: Endpoint tests through the FastAPI test client
# - test_middleware.py / test_config.py: Interceptors and settings
#
# Run tests with: pytest
# =============================================================================
