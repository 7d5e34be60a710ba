"""
Commands for the memes capability.

- static.py: `memes`, `memes.list`, `memes.info`
- registration.py: the generated `memes.generate.<key>` tree and its shortcuts
- builder.py: MemeInfo -> Command
"""

from .builder import CommandBuilder, MemeCommandBuilder
from .registration import GENERATE_COMMAND, re_register_generate_commands, refresh_shortcuts
from .static import ROOT_COMMAND, register_static_commands

__all__ = [
    "CommandBuilder",
    "MemeCommandBuilder",
    "GENERATE_COMMAND",
    "ROOT_COMMAND",
    "re_register_generate_commands",
    "refresh_shortcuts",
    "register_static_commands",
]
