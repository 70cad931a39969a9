"""
API module - FastAPI routes and HTTP handling.

This module handles:
- Request parsing into typed operations
- Envelope formatting
- Error handling
- Route definitions
"""
from qualifier.api.main import app, create_app

__all__ = ["app", "create_app"]
