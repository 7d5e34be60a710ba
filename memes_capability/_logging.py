"""Capability-local structured logging utilities."""

import logging

import structlog
from typing import Any, Optional


def get_component_logger(component: str, logger: Optional[Any] = None) -> Any:
    """Return `logger` (or the default structlog logger) bound to `component`.

    Tests inject a MagicMock whose bind() returns itself.
    """
    base = logger or structlog.get_logger()
    return base.bind(component=component)


def configure_logging(debug: bool = False) -> None:
    """Set the process-wide structlog level. Only entry points call this."""
    level = logging.DEBUG if debug else logging.INFO
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(level))
