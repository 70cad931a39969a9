"""
API Routes module - Endpoint definitions.

- bfhl.py   : The operation endpoint
- health.py : Health check endpoint
"""
from qualifier.api.routes.bfhl import router as bfhl_router
from qualifier.api.routes.health import router as health_router

__all__ = [
    "bfhl_router",
    "health_router",
]
