"""Operator status reporting on top of an optional host notifier."""

from typing import Any, Optional, Sequence

from memes_capability import messages
from memes_capability._logging import get_component_logger
from memes_capability.host import Notifier, NotifierSeverity, NullNotifier
from memes_capability.version import format_version


class StatusReporter:
    """Renders the three lifecycle statuses: initializing, danger, success/warning.

    A notifier that raises never interrupts activation; the failure is logged
    and the status is dropped.
    """

    def __init__(self, notifier: Optional[Notifier] = None, logger: Optional[Any] = None):
        self.notifier: Notifier = notifier if notifier is not None else NullNotifier()
        self._logger = get_component_logger("status_reporter", logger)

    def _update(self, severity: NotifierSeverity, content: str) -> None:
        try:
            self.notifier.update(severity, content)
        except Exception as e:
            self._logger.warning(
                "notifier_update_failed",
                severity=severity.value,
                error=str(e),
                exc_info=True,
            )

    def initializing(self) -> None:
        self._update(NotifierSeverity.INITIALIZING, messages.INITIALIZING)

    def danger(self, content: str) -> None:
        self._update(NotifierSeverity.DANGER, content)

    def backend_sync_failed(self, not_found: bool) -> None:
        hint = messages.SYNC_FAILED_NOT_FOUND_HINT if not_found else messages.SYNC_FAILED_HINT
        self.danger(f"{messages.SYNC_FAILED}\n{hint}")

    def registration_failed(self) -> None:
        self.danger(messages.REGISTRATION_FAILED)

    def ready(
        self,
        version: str,
        count: int,
        version_ok: bool,
        min_version: Sequence[int],
    ) -> None:
        summary = messages.READY.format(version=version, count=count)
        if version_ok:
            self._update(NotifierSeverity.SUCCESS, summary)
            return
        warning = messages.VERSION_WARNING.format(min_version=format_version(min_version))
        self._update(NotifierSeverity.WARNING, f"{warning}\n{summary}")

    def dispose(self) -> None:
        try:
            self.notifier.dispose()
        except Exception as e:
            self._logger.warning("notifier_dispose_failed", error=str(e))
