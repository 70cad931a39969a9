"""
Services module - Business logic and orchestration.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
- math_service.py : Fibonacci, prime filter, LCM, HCF
- dispatcher.py   : Runs a parsed operation and classifies failures
"""
from qualifier.services.dispatcher import OperationDispatcher, QuestionAnswerer

__all__ = [
    "OperationDispatcher",
    "QuestionAnswerer",
]
