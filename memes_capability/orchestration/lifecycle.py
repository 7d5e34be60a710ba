"""MemesCapability - staged activation of the memes capability.

One activation runs the stages strictly in order:

    state container -> backend sync -> commands + shortcuts -> version check

Any failure stops the remaining stages. Failures are logged, reported to the
operator notifier and never raised to the host: the capability stays loaded
but inert. There are no retries; a new activation starts from scratch.
"""

from typing import Any, Callable, Optional

from meme_api import MemeAPI, MemeError
from memes_capability._logging import get_component_logger
from memes_capability.commands.builder import CommandBuilder, MemeCommandBuilder
from memes_capability.commands.registration import (
    re_register_generate_commands,
    refresh_shortcuts,
)
from memes_capability.commands.static import register_static_commands
from memes_capability.config import Config
from memes_capability.host import PluginHost
from memes_capability.notifier import StatusReporter
from memes_capability.orchestration.types import LifecycleState
from memes_capability.state import MemeInternal, MemePublic
from memes_capability.sync import update_infos
from memes_capability.version import version_meets

# Host-wide name the public facade is published under
SERVICE_NAME = "memes_api"

BuilderFactory = Callable[[MemeAPI], CommandBuilder]


class MemesCapability:
    """
    Orchestrates one activation against a PluginHost.

    Example:
        capability = MemesCapability(host, config)
        state = await capability.apply()      # never raises on backend/build errors
        if state == LifecycleState.ACTIVE:
            memes = host.services.get(SERVICE_NAME)
        ...
        await capability.dispose()
    """

    def __init__(
        self,
        host: PluginHost,
        config: Optional[Config] = None,
        *,
        builder_factory: Optional[BuilderFactory] = None,
        logger: Optional[Any] = None,
    ):
        self.host = host
        self.config = config or Config()
        self._builder_factory = builder_factory or MemeCommandBuilder
        self._base_logger = logger
        self._logger = get_component_logger("memes_capability", logger)
        self._reporter: Optional[StatusReporter] = None

        self.state = LifecycleState.STARTING
        self.internal: Optional[MemeInternal] = None
        self.public: Optional[MemePublic] = None
        self.version_ok: Optional[bool] = None
        self.error: Optional[Exception] = None

    @property
    def is_active(self) -> bool:
        return self.state == LifecycleState.ACTIVE

    async def _create_reporter(self) -> StatusReporter:
        try:
            notifier = await self.host.create_notifier()
        except Exception as e:
            self._logger.warning("notifier_unavailable", error=str(e))
            notifier = None
        return StatusReporter(notifier, logger=self._base_logger)

    def _dispose_commands(self, internal: MemeInternal) -> None:
        for attr in ("cmd", "static_cmd"):
            handle = getattr(internal, attr)
            if handle is None:
                continue
            try:
                handle.dispose()
            except Exception as e:
                self._logger.warning("command_dispose_failed", command=handle.name, error=str(e))
            setattr(internal, attr, None)

    async def apply(self) -> LifecycleState:
        if self.state != LifecycleState.STARTING:
            self._logger.warning("memes_capability_already_applied", state=self.state.value)
            return self.state

        reporter = self._reporter = await self._create_reporter()
        reporter.initializing()

        # 1. Backend sync
        self.state = LifecycleState.SYNCING_BACKEND
        try:
            api = MemeAPI(
                self.host.http.extend(self.config.request),
                transport=self.host.transport,
            )
            internal = self.internal = MemeInternal(
                api=api,
                commands=self.host.commands,
                config=self.config,
                reporter=reporter,
            )
            await update_infos(internal)
        except Exception as e:
            not_found = isinstance(e, MemeError) and e.is_not_found
            self.error = e
            self._logger.warning(
                "backend_sync_failed",
                error=str(e),
                not_found=not_found,
                exc_info=True,
            )
            reporter.backend_sync_failed(not_found)
            self.state = LifecycleState.SYNC_FAILED
            return self.state
        self.state = LifecycleState.BACKEND_SYNCED

        # 2. Commands
        self.state = LifecycleState.REGISTERING_COMMANDS
        try:
            builder = self._builder_factory(internal.api)
            register_static_commands(internal)
            await re_register_generate_commands(internal, builder, logger=self._logger)
            await refresh_shortcuts(internal, builder, logger=self._logger)
        except Exception as e:
            self.error = e
            self._dispose_commands(internal)
            self._logger.warning("command_registration_failed", error=str(e), exc_info=True)
            reporter.registration_failed()
            self.state = LifecycleState.REGISTRATION_FAILED
            return self.state

        # 3. Report, then publish as part of becoming active
        self.version_ok = version_meets(internal.api_version, self.config.min_backend_version)
        reporter.ready(
            internal.api_version,
            internal.meme_count,
            self.version_ok,
            self.config.min_backend_version,
        )
        if not self.version_ok:
            self._logger.warning(
                "backend_version_too_old",
                backend_version=internal.api_version,
                min_version=list(self.config.min_backend_version),
            )
        self._logger.info(
            "memes_capability_initialized",
            backend_version=internal.api_version,
            meme_count=internal.meme_count,
        )
        self.public = MemePublic(internal)
        self.host.services.set(SERVICE_NAME, self.public)
        self.state = LifecycleState.ACTIVE
        return self.state

    async def dispose(self) -> None:
        """Release everything this activation acquired. Safe to call in any state."""
        if self.state == LifecycleState.DISPOSED:
            return

        if self.public is not None and self.host.services.get(SERVICE_NAME) is self.public:
            self.host.services.remove(SERVICE_NAME)
        self.public = None

        internal = self.internal
        try:
            if internal is not None:
                self._dispose_commands(internal)
                await internal.api.aclose()
        finally:
            if self._reporter is not None:
                self._reporter.dispose()
                self._reporter = None
            self._logger.debug("memes_capability_disposed", previous_state=self.state.value)
            self.state = LifecycleState.DISPOSED


async def apply(
    host: PluginHost,
    config: Optional[Config] = None,
    **kwargs: Any,
) -> MemesCapability:
    """Create and activate a MemesCapability in one call."""
    capability = MemesCapability(host, config, **kwargs)
    await capability.apply()
    return capability


__all__ = ["SERVICE_NAME", "MemesCapability", "apply"]
