"""
Generate Command Registration.

The generated commands are a disposable view over the current meme infos:
every sync throws the old tree away and builds a new one.

    memes                     (static root, see static.py)
    └── memes.generate        (state.cmd, owned here)
        ├── memes.generate.<key>
        └── ...
"""

from typing import Any, Optional

import structlog

from memes_capability.commands.builder import CommandBuilder
from memes_capability.host import Command
from memes_capability.state import MemeInternal

GENERATE_COMMAND = "generate"


async def re_register_generate_commands(
    state: MemeInternal,
    builder: CommandBuilder,
    logger: Optional[Any] = None,
) -> None:
    """
    Replace the generate command tree with one built from state.infos.

    The previous tree is disposed before anything new is registered. The new
    root is stored on the state before its children are built, so if a build
    fails the caller still holds the partial tree and can dispose it.
    """
    if logger is None:
        logger = structlog.get_logger("commands.registration")

    async with state.command_lock:
        if state.cmd is not None:
            state.cmd.dispose()
            state.cmd = None

        root_command = Command(name=GENERATE_COMMAND, description="Generate a meme")
        if state.static_cmd is not None and not state.static_cmd.disposed:
            state.cmd = state.static_cmd.subcommand(root_command)
        else:
            state.cmd = state.commands.register(root_command)

        infos = state.infos
        for key in infos:
            state.cmd.subcommand(builder.build(infos[key]))

        logger.debug("generate_commands_registered", root=state.cmd.name, count=len(infos))


async def refresh_shortcuts(
    state: MemeInternal,
    builder: CommandBuilder,
    logger: Optional[Any] = None,
) -> None:
    """Derive shortcuts for the built tree; a no-op when unsupported or disabled."""
    derive = getattr(builder, "derive_shortcuts", None)
    if derive is None or not state.config.enable_shortcut:
        return
    if state.cmd is None or state.cmd.disposed:
        return

    if logger is None:
        logger = structlog.get_logger("commands.registration")

    async with state.command_lock:
        derive(state.cmd)
        logger.debug("shortcuts_refreshed", count=len(state.cmd.shortcuts))


__all__ = ["GENERATE_COMMAND", "re_register_generate_commands", "refresh_shortcuts"]
