"""
FastAPI dependencies.

Settings and the dispatcher are created once by create_app() and kept
on app.state; routes receive them through these providers.
"""
from fastapi import Request

from qualifier.core.config import Settings
from qualifier.services.dispatcher import OperationDispatcher


def get_app_settings(request: Request) -> Settings:
    """Settings the running app was built with."""
    return request.app.state.settings


def get_dispatcher(request: Request) -> OperationDispatcher:
    """Dispatcher shared by all requests of the running app."""
    return request.app.state.dispatcher
