"""Capability Registration for the Memes Capability.

Describes the capability to a host and hands it the activation entry point.

Usage:
    from memes_capability.capability.wiring import register_capability
    registration = register_capability()

    host = PluginHost(...)
    capability = await registration["apply"](host, load_config_from_env())
"""

import logging
from pathlib import Path
from typing import Any, Dict

from memes_capability.orchestration.lifecycle import SERVICE_NAME, apply
from memes_capability.version import MIN_BACKEND_VERSION, format_version

logger = logging.getLogger(__name__)

# =============================================================================
# CAPABILITY CONSTANTS
# =============================================================================

CAPABILITY_ID = "memes_api"
CAPABILITY_VERSION = "0.1.0"
CAPABILITY_ROOT = Path(__file__).resolve().parent.parent

INJECT = {
    "required": ["http"],
    "optional": ["notifier"],
}


# =============================================================================
# CAPABILITY REGISTRATION
# =============================================================================

def register_capability() -> Dict[str, Any]:
    """
    Describe the memes capability for a host.

    Returns:
        Dict with:
        - capability_id / capability_version / capability_root
        - service_name: name the public facade is published under once active
        - inject: host capabilities required / optionally used
        - min_backend_version: oldest backend considered compatible
        - apply: async factory (host, config) -> MemesCapability
    """
    logger.debug("Registering capability %s %s", CAPABILITY_ID, CAPABILITY_VERSION)
    return {
        "capability_id": CAPABILITY_ID,
        "capability_version": CAPABILITY_VERSION,
        "capability_root": str(CAPABILITY_ROOT),
        "service_name": SERVICE_NAME,
        "inject": {k: list(v) for k, v in INJECT.items()},
        "min_backend_version": format_version(MIN_BACKEND_VERSION),
        "apply": apply,
    }


__all__ = [
    "CAPABILITY_ID",
    "CAPABILITY_VERSION",
    "CAPABILITY_ROOT",
    "INJECT",
    "register_capability",
]
