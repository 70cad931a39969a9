"""
LLM module - Language model integration.

This module handles all LLM interactions:
- Prompt construction
- API calls to Google Gemini
- Response parsing
- Error handling for LLM failures
"""
from qualifier.llm.client import LLMClient, SHORT_ANSWER_PROMPT

__all__ = [
    "LLMClient",
    "SHORT_ANSWER_PROMPT",
]
