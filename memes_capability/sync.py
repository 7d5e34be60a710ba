"""Backend sync: pull meme infos and version into the activation state."""

from types import MappingProxyType

from memes_capability.state import MemeInternal


async def update_infos(state: MemeInternal) -> None:
    """Fetch capabilities and commit infos and version together.

    Errors from the API client propagate unchanged; on failure the state
    keeps whatever snapshot it had before.
    """
    infos, version = await state.api.fetch_capabilities()
    state.infos, state.api_version = MappingProxyType(dict(infos)), version


__all__ = ["update_infos"]
