"""
Configuration management via environment variables.

This module loads configuration from .env file using python-dotenv.
All configuration values are accessed through the Settings class.

Settings are built once at startup and handed to the application factory,
which stores them on app.state for the routes and services that need them.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# Load .env file from project root
# This must happen before accessing os.environ
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    frozen=True makes the dataclass immutable, preventing accidental
    modification of settings at runtime.

    Attributes:
        app_name: Application identifier for logging
        app_env: Environment name (development, staging, production)
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for daily log files (empty string disables them)
        official_email: Email address echoed in every response envelope
        gemini_api_key: API key for Google Gemini service
        llm_model: Gemini model identifier
        llm_temperature: LLM creativity (0.0 = deterministic, 1.0 = creative)
        llm_max_tokens: Maximum response length
        ai_timeout_seconds: Timeout handed to the Gemini SDK per request
        enable_audit_logging: Whether every request is logged
        host: Bind address for uvicorn
        port: Bind port for uvicorn
    """
    # Application settings
    app_name: str = "BFHLQualifierAPI"
    app_env: str = "development"
    log_level: str = "INFO"
    log_dir: str = "logs"

    # Response envelope
    official_email: str = ""

    # LLM settings
    gemini_api_key: str = ""
    llm_model: str = "gemini-pro"
    llm_temperature: float = 0.1
    llm_max_tokens: int = 10
    ai_timeout_seconds: int = 30

    # Safety settings
    enable_audit_logging: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def load_settings() -> Settings:
    """
    Build a Settings instance from the current environment.

    Unlike get_settings(), this always re-reads os.environ.

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "BFHLQualifierAPI"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_dir=_get_env("LOG_DIR", "logs"),

        # Envelope
        official_email=_get_env("OFFICIAL_EMAIL", ""),

        # LLM
        gemini_api_key=_get_env("GEMINI_API_KEY", ""),
        llm_model=_get_env("LLM_MODEL", "gemini-pro"),
        llm_temperature=float(_get_env("LLM_TEMPERATURE", "0.1")),
        llm_max_tokens=int(_get_env("LLM_MAX_TOKENS", "10")),
        ai_timeout_seconds=int(_get_env("AI_TIMEOUT_SECONDS", "30")),

        # Safety
        enable_audit_logging=_get_env("ENABLE_AUDIT_LOGGING", "true").lower() == "true",

        # Server
        host=_get_env("HOST", "0.0.0.0"),
        port=int(_get_env("PORT", "8080")),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are read once at startup; maxsize=1 ensures only one
    instance exists for the process lifetime.

    Returns:
        Settings instance with all configuration values
    """
    return load_settings()
