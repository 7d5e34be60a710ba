#!/usr/bin/env python3
"""Activate the memes capability once against a backend and report.

Usage:
    python -m memes_capability
    python -m memes_capability --base-url http://127.0.0.1:2233 --timeout 10
    python -m memes_capability --no-shortcut --debug

Environment Variables:
    MEMES_API_BASE_URL, MEMES_API_TIMEOUT, MEMES_API_ENABLE_SHORTCUT
    (command-line flags take precedence)

Exit code is 0 when the capability reached the active state, 1 otherwise.
"""

import argparse
import asyncio
import sys
from typing import List, Optional

import structlog

from memes_capability._logging import configure_logging
from memes_capability.commands.static import ROOT_COMMAND
from memes_capability.config import load_config_from_env
from memes_capability.host import LoggingNotifier, PluginHost
from memes_capability.orchestration import LifecycleState, MemesCapability


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="memes_capability",
        description="Check a meme-generator backend by activating the memes capability",
    )
    parser.add_argument("--base-url", help="Backend base URL")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument(
        "--no-shortcut",
        action="store_true",
        help="Do not register backend-declared shortcuts",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    logger = structlog.get_logger("memes_capability.cli")

    config = load_config_from_env()
    if args.base_url:
        config.request.base_url = args.base_url
    if args.timeout is not None:
        config.request.timeout = args.timeout
    if args.no_shortcut:
        config.enable_shortcut = False

    host = PluginHost(notifier_factory=LoggingNotifier)
    capability = MemesCapability(host, config)
    try:
        state = await capability.apply()
        logger.info(
            "memes_capability_state",
            state=state.value,
            commands=len(host.commands.names(ROOT_COMMAND)),
            shortcuts=len(host.commands.shortcuts),
        )
        if args.debug:
            for name in host.commands.names(ROOT_COMMAND):
                logger.debug("registered_command", name=name)
    finally:
        await capability.dispose()

    return 0 if state == LifecycleState.ACTIVE else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(debug=args.debug)
    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
