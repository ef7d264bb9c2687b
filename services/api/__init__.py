from .app import app, create_app, build_tailor_handler
from .config import APIConfig, get_config

__all__ = [
    "app",
    "create_app",
    "build_tailor_handler",
    "APIConfig",
    "get_config",
]
