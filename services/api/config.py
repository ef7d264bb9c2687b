import os
import logging
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Optional, Tuple

from shared.schemas.tailor import OutputFormat

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3001
DEFAULT_CORS_ORIGINS = ",".join([
    "http://localhost:3000",
    "http://localhost:5173",
    "https://cv-tailor-frontend.onrender.com",
])

GEMINI_KEY_ENV_VARS = ["API_GEMINI_API_KEY", "GEMINI_API_KEY", "GOOGLE_API_KEY"]
OPENAI_KEY_ENV_VARS = ["API_OPENAI_API_KEY", "OPENAI_API_KEY"]


def get_port_from_env() -> int:
    """
    Get port from environment.

    Priority: PORT > API_PORT > default 3001
    """
    port_str = os.environ.get("PORT") or os.environ.get("API_PORT") or str(DEFAULT_PORT)
    try:
        return int(port_str)
    except ValueError:
        return DEFAULT_PORT


def _find_key(env_vars: List[str]) -> Tuple[Optional[str], Optional[str]]:
    for var_name in env_vars:
        key = os.environ.get(var_name)
        if key and len(key.strip()) > 0:
            return key.strip(), var_name
    return None, None


def get_gemini_api_key() -> Tuple[Optional[str], Optional[str]]:
    """
    Get Gemini API key from environment variables.

    Checks in order: API_GEMINI_API_KEY, GEMINI_API_KEY, GOOGLE_API_KEY

    Returns:
        Tuple of (api_key, source_env_var_name) or (None, None) if not found
    """
    return _find_key(GEMINI_KEY_ENV_VARS)


def get_openai_api_key() -> Tuple[Optional[str], Optional[str]]:
    """
    Get OpenAI API key from environment variables.

    Checks in order: API_OPENAI_API_KEY, OPENAI_API_KEY

    Returns:
        Tuple of (api_key, source_env_var_name) or (None, None) if not found
    """
    return _find_key(OPENAI_KEY_ENV_VARS)


class APIConfig(BaseSettings):
    """Configuration for the API service."""

    # Server configuration
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    debug: bool = False

    # Origins allowed to call the API cross-origin (comma separated)
    cors_origins: str = DEFAULT_CORS_ORIGINS

    # Provider configuration
    output_format: OutputFormat = OutputFormat.JSON
    gemini_model: str = "gemini-2.5-flash"
    openai_model: str = "gpt-5-nano"
    openai_base_url: Optional[str] = None
    provider_timeout: Optional[float] = None  # seconds; None leaves provider calls unbounded

    class Config:
        env_prefix = "API_"
        env_file = ".env"
        extra = "ignore"

    @field_validator("provider_timeout")
    @classmethod
    def _positive_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("provider_timeout must be greater than 0 seconds")
        return value

    @property
    def allowed_origins(self) -> List[str]:
        """Allow-listed origins, normalized without trailing slashes."""
        return [o.strip().rstrip("/") for o in self.cors_origins.split(",") if o.strip()]

    @property
    def gemini_api_key(self) -> Optional[str]:
        key, _ = get_gemini_api_key()
        return key

    @property
    def openai_api_key(self) -> Optional[str]:
        key, _ = get_openai_api_key()
        return key


def get_config() -> APIConfig:
    """Get API configuration from environment."""
    config = APIConfig()
    # PORT (set by most hosting platforms) wins over API_PORT
    config_dict = config.model_dump()
    config_dict["port"] = get_port_from_env()
    return APIConfig(**config_dict)


def _mask(key: str) -> str:
    return f"{key[:4]}...{key[-4:]}" if len(key) > 8 else "***"


def log_provider_key_status():
    """Log provider API key status at startup (does NOT log the keys themselves)."""
    for provider, (key, source), env_vars in (
        ("Gemini", get_gemini_api_key(), GEMINI_KEY_ENV_VARS),
        ("OpenAI", get_openai_api_key(), OPENAI_KEY_ENV_VARS),
    ):
        if key:
            logger.info(f"{provider} API key FOUND from {source} (masked: {_mask(key)})")
        else:
            logger.warning(f"{provider} API key NOT FOUND - checked: {', '.join(env_vars)}")
