"""
Command Builder for Meme Commands.

Turns one MemeInfo into one invocable Command, and derives shortcut
patterns for an already-built command tree.
"""

from typing import Any, Optional, Protocol

from meme_api import MemeAPI, MemeInfo
from memes_capability.host import Command, CommandHandle, Shortcut


class CommandBuilder(Protocol):
    def build(self, info: MemeInfo) -> Command:
        ...


class MemeCommandBuilder:
    """
    Default builder.

    Example:
        builder = MemeCommandBuilder(api)
        command = builder.build(info)       # name=info.key, aliases=info.keywords
        builder.derive_shortcuts(root)      # after all commands are registered
    """

    def __init__(self, api: MemeAPI):
        self._api = api

    def build(self, info: MemeInfo) -> Command:
        api = self._api
        key = info.key
        default_texts = list(info.params.default_texts)

        async def render(*texts: str) -> bytes:
            return await api.render_meme(key, texts=list(texts) or default_texts)

        return Command(
            name=key,
            description=" / ".join(info.keywords) or key,
            aliases=list(info.keywords),
            handler=render,
            meta={"info": info},
        )

    def derive_shortcuts(self, root: CommandHandle) -> None:
        root.clear_shortcuts()
        for child in root.children:
            info: Optional[Any] = child.command.meta.get("info")
            if not isinstance(info, MemeInfo):
                continue
            for shortcut in info.shortcuts:
                root.add_shortcut(
                    Shortcut(
                        pattern=shortcut.pattern,
                        target=child.name,
                        texts=list(shortcut.texts),
                        humanized=shortcut.humanized,
                    )
                )


__all__ = ["CommandBuilder", "MemeCommandBuilder"]
