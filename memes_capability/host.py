"""
Host Surface for the Memes Capability.

The capability talks to its host through a small set of collaborators:

- CommandRegistry: where invocable commands (and their shortcuts) live.
  Registration returns a CommandHandle; disposing a handle releases the
  command, its aliases, its shortcuts and every subcommand under it.
- ServiceRegistry: host-wide named services other capabilities can depend on.
- Notifier: optional operator-visible status surface.
- PluginHost: bundles the above with the host's HTTP transport settings.

The classes here are an in-memory reference host, used by the CLI and tests.
A real host provides objects with the same shape.
"""

from __future__ import annotations

import inspect
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple

import httpx

from meme_api import RequestConfig
from memes_capability._logging import get_component_logger


class CommandConflictError(ValueError):
    """A command with the same full name is already registered."""


class UnknownCommandError(LookupError):
    """No command or alias matches the requested name."""


class DisposedHandleError(RuntimeError):
    """The command handle was already disposed."""


# =============================================================================
# COMMANDS
# =============================================================================

@dataclass
class Command:
    name: str
    description: str = ""
    aliases: List[str] = field(default_factory=list)
    handler: Optional[Callable[..., Any]] = None
    meta: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Shortcut:
    """Regex pattern that invokes `target` with texts built from named groups."""

    pattern: str
    target: str
    texts: List[str] = field(default_factory=list)
    humanized: Optional[str] = None

    def match(self, text: str) -> Optional[List[str]]:
        try:
            found = re.fullmatch(self.pattern, text)
        except re.error:
            return None
        if found is None:
            return None
        groups = {k: v or "" for k, v in found.groupdict().items()}
        try:
            return [t.format(**groups) for t in self.texts]
        except (KeyError, IndexError, ValueError):
            return list(self.texts)


class CommandHandle:
    def __init__(
        self,
        registry: "CommandRegistry",
        name: str,
        command: Command,
        parent: Optional["CommandHandle"] = None,
    ):
        self._registry = registry
        self.name = name
        self.command = command
        self.parent = parent
        self._children: List[CommandHandle] = []
        self._shortcuts: List[Shortcut] = []
        self._aliases: List[str] = []
        self._disposed = False

    def __repr__(self) -> str:
        state = "disposed" if self._disposed else "live"
        return f"<CommandHandle {self.name} ({state})>"

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def children(self) -> List["CommandHandle"]:
        return list(self._children)

    @property
    def shortcuts(self) -> List[Shortcut]:
        return list(self._shortcuts)

    def _check_alive(self) -> None:
        if self._disposed:
            raise DisposedHandleError(f"Command '{self.name}' was disposed")

    def subcommand(self, command: Command) -> "CommandHandle":
        self._check_alive()
        return self._registry.register(command, parent=self)

    def add_shortcut(self, shortcut: Shortcut) -> None:
        self._check_alive()
        self._registry._add_shortcut(shortcut)
        self._shortcuts.append(shortcut)

    def clear_shortcuts(self) -> None:
        for shortcut in self._shortcuts:
            self._registry._remove_shortcut(shortcut)
        self._shortcuts = []

    def dispose(self) -> None:
        if self._disposed:
            return
        for child in list(reversed(self._children)):
            child.dispose()
        self.clear_shortcuts()
        self._registry._unregister(self)
        self._disposed = True
        if self.parent is not None and self in self.parent._children:
            self.parent._children.remove(self)


class CommandRegistry:
    """In-memory command table keyed by dotted full name."""

    def __init__(self, logger: Optional[Any] = None):
        self._commands: Dict[str, CommandHandle] = {}
        self._aliases: Dict[str, str] = {}
        self._shortcuts: List[Shortcut] = []
        self._logger = get_component_logger("command_registry", logger)

    def register(self, command: Command, parent: Optional[CommandHandle] = None) -> CommandHandle:
        name = f"{parent.name}.{command.name}" if parent is not None else command.name
        if name in self._commands:
            raise CommandConflictError(f"Command '{name}' is already registered")

        handle = CommandHandle(self, name, command, parent)
        self._commands[name] = handle
        for alias in command.aliases:
            if alias in self._aliases or alias in self._commands:
                self._logger.warning(
                    "command_alias_conflict",
                    alias=alias,
                    command=name,
                    owner=self._aliases.get(alias, alias),
                )
                continue
            self._aliases[alias] = name
            handle._aliases.append(alias)

        if parent is not None:
            parent._children.append(handle)
        return handle

    def _unregister(self, handle: CommandHandle) -> None:
        for alias in handle._aliases:
            if self._aliases.get(alias) == handle.name:
                del self._aliases[alias]
        handle._aliases = []
        if self._commands.get(handle.name) is handle:
            del self._commands[handle.name]

    def _add_shortcut(self, shortcut: Shortcut) -> None:
        self._shortcuts.append(shortcut)

    def _remove_shortcut(self, shortcut: Shortcut) -> None:
        for i, existing in enumerate(self._shortcuts):
            if existing is shortcut:
                del self._shortcuts[i]
                return

    def get(self, name: str) -> Optional[Command]:
        full = self.resolve(name)
        return self._commands[full].command if full is not None else None

    def has(self, name: str) -> bool:
        return name in self._commands

    def names(self, prefix: Optional[str] = None) -> List[str]:
        if prefix is None:
            return sorted(self._commands)
        return sorted(n for n in self._commands if n == prefix or n.startswith(prefix + "."))

    def resolve(self, name_or_alias: str) -> Optional[str]:
        if name_or_alias in self._commands:
            return name_or_alias
        return self._aliases.get(name_or_alias)

    @property
    def shortcuts(self) -> List[Shortcut]:
        return list(self._shortcuts)

    def match_shortcut(self, text: str) -> Optional[Tuple[str, List[str]]]:
        for shortcut in self._shortcuts:
            texts = shortcut.match(text)
            if texts is not None:
                return shortcut.target, texts
        return None

    async def execute(self, name_or_alias: str, *args: Any) -> Any:
        full = self.resolve(name_or_alias)
        if full is None:
            raise UnknownCommandError(name_or_alias)
        handler = self._commands[full].command.handler
        if handler is None:
            return None
        result = handler(*args)
        if inspect.isawaitable(result):
            result = await result
        return result


# =============================================================================
# SERVICES
# =============================================================================

class ServiceRegistry:
    def __init__(self):
        self._services: Dict[str, Any] = {}

    def set(self, name: str, service: Any) -> None:
        self._services[name] = service

    def get(self, name: str) -> Optional[Any]:
        return self._services.get(name)

    def has(self, name: str) -> bool:
        return name in self._services

    def remove(self, name: str) -> None:
        self._services.pop(name, None)


# =============================================================================
# NOTIFIER
# =============================================================================

class NotifierSeverity(str, Enum):
    INITIALIZING = "initializing"
    DANGER = "danger"
    SUCCESS = "success"
    WARNING = "warning"


class Notifier(Protocol):
    def update(self, severity: NotifierSeverity, content: str) -> None:
        ...

    def dispose(self) -> None:
        ...


class NullNotifier:
    """Stands in when the host has no notifier capability."""

    def update(self, severity: NotifierSeverity, content: str) -> None:
        pass

    def dispose(self) -> None:
        pass


class LoggingNotifier:
    """Notifier that writes status updates to the structured log."""

    def __init__(self, logger: Optional[Any] = None):
        self._logger = get_component_logger("notifier", logger)
        self.severity: Optional[NotifierSeverity] = None
        self.content: Optional[str] = None

    def update(self, severity: NotifierSeverity, content: str) -> None:
        self.severity = severity
        self.content = content
        log = self._logger.warning if severity in (NotifierSeverity.DANGER, NotifierSeverity.WARNING) else self._logger.info
        log("notifier_status", severity=severity.value, content=content)

    def dispose(self) -> None:
        self.severity = None
        self.content = None


# =============================================================================
# HOST
# =============================================================================

@dataclass
class PluginHost:
    commands: CommandRegistry = field(default_factory=CommandRegistry)
    services: ServiceRegistry = field(default_factory=ServiceRegistry)
    http: RequestConfig = field(default_factory=RequestConfig)
    transport: Optional[httpx.AsyncBaseTransport] = None
    # None means the host has no notifier capability
    notifier_factory: Optional[Callable[[], Any]] = None

    async def create_notifier(self) -> Optional[Notifier]:
        if self.notifier_factory is None:
            return None
        notifier = self.notifier_factory()
        if inspect.isawaitable(notifier):
            notifier = await notifier
        return notifier


__all__ = [
    "CommandConflictError",
    "UnknownCommandError",
    "DisposedHandleError",
    "Command",
    "Shortcut",
    "CommandHandle",
    "CommandRegistry",
    "ServiceRegistry",
    "NotifierSeverity",
    "Notifier",
    "NullNotifier",
    "LoggingNotifier",
    "PluginHost",
]
