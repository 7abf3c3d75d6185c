# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware setup, error handlers, static files
# - config.py: Environment-selected settings
# - middleware.py: Request interceptor chain
# - dependencies.py: Store, service and request body injection
# - routers/: API endpoint definitions
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
