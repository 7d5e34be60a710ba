"""Static commands: the `memes` root with `list` and `info`."""

from typing import List

from memes_capability import messages
from memes_capability.host import Command, CommandHandle
from memes_capability.state import MemeInternal
from memes_capability.version import format_version

ROOT_COMMAND = "memes"


def format_meme_list(state: MemeInternal) -> str:
    infos = state.infos
    if not infos:
        return messages.LIST_EMPTY
    lines: List[str] = [messages.LIST_HEADER.format(count=len(infos))]
    for key in sorted(infos):
        keywords = infos[key].keywords
        lines.append(f"{key}: {', '.join(keywords)}" if keywords else key)
    return "\n".join(lines)


def format_meme_info(state: MemeInternal, key: str) -> str:
    info = state.infos.get(key)
    if info is None:
        # allow lookup by keyword as well
        info = next((i for i in state.infos.values() if key in i.keywords), None)
    if info is None:
        return messages.INFO_NOT_FOUND.format(key=key)

    params = info.params
    lines = [
        f"key: {info.key}",
        f"keywords: {', '.join(info.keywords) or '-'}",
        f"images: {params.min_images}-{params.max_images}",
        f"texts: {params.min_texts}-{params.max_texts}",
    ]
    if params.default_texts:
        lines.append(f"default texts: {', '.join(params.default_texts)}")
    if info.shortcuts:
        lines.append("shortcuts: " + ", ".join(s.humanized or s.pattern for s in info.shortcuts))
    if info.tags:
        lines.append(f"tags: {', '.join(info.tags)}")
    return "\n".join(lines)


def register_static_commands(state: MemeInternal) -> CommandHandle:
    """Register `memes`, `memes.list` and `memes.info`; handlers read state lazily."""

    def list_memes() -> str:
        return format_meme_list(state)

    def meme_info(*args: str) -> str:
        if not args:
            return messages.INFO_USAGE
        return format_meme_info(state, args[0])

    root = state.commands.register(
        Command(
            name=ROOT_COMMAND,
            description=f"Meme generator (backend >= {format_version(state.config.min_backend_version)})",
        )
    )
    root.subcommand(Command(name="list", description="List available memes", handler=list_memes))
    root.subcommand(Command(name="info", description="Show details of a meme", handler=meme_info))
    state.static_cmd = root
    return root


__all__ = ["ROOT_COMMAND", "format_meme_list", "format_meme_info", "register_static_commands"]
