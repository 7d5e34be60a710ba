"""
Memes Capability - meme-generator backend as chat commands.

Activation syncs the backend's meme list, turns every meme into a
disposable command, checks the backend version and reports status to an
optional operator notifier. Failures leave the capability loaded but inert.

Architecture:
    Backend sync -> Command sync (+ shortcuts) -> Version check -> Publish

Key components:
- orchestration/lifecycle.py: MemesCapability, the staged activation
- sync.py: backend sync stage
- commands/: static commands, generated command tree, command builder
- state.py: private activation state and its read-only public facade
- host.py: host surface (commands, services, notifier)

Usage:
    from memes_capability import PluginHost, apply, load_config_from_env

    host = PluginHost()
    capability = await apply(host, load_config_from_env())
    memes = host.services.get("memes_api")   # MemePublic, once active
"""

from memes_capability.capability.wiring import (
    register_capability,
    CAPABILITY_ID,
    CAPABILITY_VERSION,
    CAPABILITY_ROOT,
)
from memes_capability.config import Config, load_config_from_env
from memes_capability.host import PluginHost
from memes_capability.orchestration import (
    LifecycleState,
    MemesCapability,
    SERVICE_NAME,
    apply,
)
from memes_capability.state import MemePublic
from memes_capability.version import MIN_BACKEND_VERSION, version_meets

__version__ = CAPABILITY_VERSION
__capability__ = CAPABILITY_ID

__all__ = [
    # Capability registration
    "register_capability",
    "CAPABILITY_ID",
    "CAPABILITY_VERSION",
    "CAPABILITY_ROOT",
    # Activation
    "apply",
    "MemesCapability",
    "LifecycleState",
    "MemePublic",
    "SERVICE_NAME",
    "PluginHost",
    # Configuration
    "Config",
    "load_config_from_env",
    "MIN_BACKEND_VERSION",
    "version_meets",
    # Metadata
    "__version__",
    "__capability__",
]
