"""REST API presentation layer for PIIGuard.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── config.py             # API configuration
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain error -> HTTP mapping
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from piiguard.presentation.api.app import create_app

__all__ = ["create_app"]
