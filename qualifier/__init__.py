"""
BFHL Qualifier API package.

This package contains all application source code organized by responsibility:
- api/       : FastAPI routes and HTTP handling
- core/      : Configuration, logging, errors and cross-cutting utilities
- services/  : Math operations and the operation dispatcher
- llm/       : Google Gemini integration
- models/    : Typed operation requests and pydantic response envelopes
"""
__version__ = "1.0.0"
