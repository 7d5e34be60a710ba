"""
Configuration for the memes capability.

Config values come from the host (constructed explicitly) or from the
environment via load_config_from_env():

    MEMES_API_BASE_URL         Backend base URL (default: http://127.0.0.1:2233)
    MEMES_API_TIMEOUT          Request timeout in seconds (default: 30)
    MEMES_API_ENABLE_SHORTCUT  Register backend-declared shortcuts (default: true)
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from meme_api import RequestConfig
from memes_capability.version import MIN_BACKEND_VERSION, VersionTuple

_TRUE = {"1", "true", "yes"}
_FALSE = {"0", "false", "no"}


def _env_bool(name: str, default: bool) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    lowered = val.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    return default


def _env_float(name: str) -> Optional[float]:
    val = os.getenv(name)
    if not val:
        return None
    try:
        return float(val)
    except ValueError:
        return None


@dataclass
class Config:
    """Capability configuration."""

    request: RequestConfig = field(default_factory=RequestConfig)
    enable_shortcut: bool = True
    min_backend_version: VersionTuple = MIN_BACKEND_VERSION


def load_config_from_env() -> Config:
    return Config(
        request=RequestConfig(
            base_url=os.getenv("MEMES_API_BASE_URL") or None,
            timeout=_env_float("MEMES_API_TIMEOUT"),
        ),
        enable_shortcut=_env_bool("MEMES_API_ENABLE_SHORTCUT", True),
    )


__all__ = ["Config", "load_config_from_env"]
