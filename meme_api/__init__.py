from .types import (
    ErrorCategory,
    MemeError,
    MemeInfo,
    MemeParams,
    MemeShortcut,
)
from .config import RequestConfig, DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .client import MemeAPI

__all__ = [
    # Types
    "ErrorCategory",
    "MemeError",
    "MemeInfo",
    "MemeParams",
    "MemeShortcut",
    # Config
    "RequestConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    # Client
    "MemeAPI",
]
