"""Orchestration for the memes capability."""

from .types import LifecycleState
from .lifecycle import SERVICE_NAME, MemesCapability, apply

__all__ = [
    "LifecycleState",
    "SERVICE_NAME",
    "MemesCapability",
    "apply",
]
