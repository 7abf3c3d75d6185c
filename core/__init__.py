# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the HTTP layer:
# - models/: Pydantic schemas for data validation
# - validation.py: Request body validation for user payloads
# - services/: In-memory user store and the user service
# =============================================================================
