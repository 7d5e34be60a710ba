"""
Activation State for the Memes Capability.

MemeInternal is the private, mutable state of one activation. Only the
lifecycle and its stages hold a reference to it. Other capabilities see the
read-only MemePublic facade published under SERVICE_NAME.
"""

import asyncio
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from meme_api import MemeAPI, MemeInfo
from memes_capability.config import Config
from memes_capability.host import CommandHandle, CommandRegistry
from memes_capability.notifier import StatusReporter

EMPTY_INFOS: Mapping[str, MemeInfo] = MappingProxyType({})


@dataclass
class MemeInternal:
    api: MemeAPI
    commands: CommandRegistry  # borrowed from the host
    config: Config = field(default_factory=Config)
    reporter: StatusReporter = field(default_factory=StatusReporter)
    # Replaced wholesale by update_infos, never mutated in place
    infos: Mapping[str, MemeInfo] = field(default_factory=lambda: EMPTY_INFOS)
    api_version: str = ""
    cmd: Optional[CommandHandle] = None
    static_cmd: Optional[CommandHandle] = None
    command_lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    @property
    def meme_count(self) -> int:
        return len(self.infos)


class MemePublic:
    """Read-only view over an activation's state."""

    __slots__ = ("_internal",)

    def __init__(self, internal: MemeInternal):
        self._internal = internal

    @property
    def api(self) -> MemeAPI:
        return self._internal.api

    @property
    def api_version(self) -> str:
        return self._internal.api_version

    @property
    def infos(self) -> Mapping[str, MemeInfo]:
        return self._internal.infos

    def __repr__(self) -> str:
        return f"<MemePublic version={self.api_version!r} memes={len(self.infos)}>"


__all__ = ["EMPTY_INFOS", "MemeInternal", "MemePublic"]
