"""Capability registration for the memes capability."""

from .wiring import (
    CAPABILITY_ID,
    CAPABILITY_VERSION,
    CAPABILITY_ROOT,
    INJECT,
    register_capability,
)

__all__ = [
    "CAPABILITY_ID",
    "CAPABILITY_VERSION",
    "CAPABILITY_ROOT",
    "INJECT",
    "register_capability",
]
