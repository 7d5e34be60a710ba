"""Lifecycle types for the memes capability."""

from enum import Enum


class LifecycleState(str, Enum):
    """Activation lifecycle.

    STARTING -> SYNCING_BACKEND -> SYNC_FAILED
                                -> BACKEND_SYNCED -> REGISTERING_COMMANDS -> REGISTRATION_FAILED
                                                                          -> ACTIVE
    Any state -> DISPOSED on teardown.
    """

    STARTING = "starting"
    SYNCING_BACKEND = "syncing_backend"
    SYNC_FAILED = "sync_failed"
    BACKEND_SYNCED = "backend_synced"
    REGISTERING_COMMANDS = "registering_commands"
    REGISTRATION_FAILED = "registration_failed"
    ACTIVE = "active"
    DISPOSED = "disposed"


__all__ = ["LifecycleState"]
