"""Logging helpers for applications and debugging sessions using minimalpack.

The library only emits records through module-level loggers and never
configures handlers on import. Most records are DEBUG messages about failures
the ``try_*`` helpers swallowed or searches that timed out; this module makes
them easy to see on a Rich console without writing handler boilerplate.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "minimalpack"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with a short ``[name]`` prefix.

    Records from loggers under ``project`` get an empty ``record.prefix``; all
    others get their top-level logger name in brackets, e.g.
    ``"urllib3.connectionpool"`` becomes ``"[urllib3]"``. Records are never
    dropped.
    """

    def __init__(self, project: str = PROJECT_PREFIX) -> None:
        super().__init__()
        self.project = project

    def filter(self, record: logging.LogRecord) -> bool:
        """Attach the prefix to ``record`` and let it through."""
        if record.name == self.project or record.name.startswith(f"{self.project}."):
            record.prefix = ""
        else:
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO,
    debug_mode: bool = False,
    color: bool = True,
    console: Console | None = None,
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    Args:
        level: Minimum level for console output (forced to DEBUG in debug_mode).
        debug_mode: Show timestamps, logger names and source paths instead of
            the third-party prefix.
        color: Enable color output when True. Ignored if ``console`` is given.
        console: Rich console to write to. Defaults to a new stderr console.

    Returns:
        RichHandler: Handler suitable to attach to any logger.
    """
    if console is None:
        color_system: ColorSystem | None = "auto" if color else None
        console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(
            logging.Formatter(fmt="%(asctime)s %(name)s: %(message)s")
        )
    else:
        handler.setFormatter(logging.Formatter(fmt="%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def enable_debug_logging(
    level: int = logging.DEBUG,
    color: bool = True,
    console: Console | None = None,
) -> logging.Handler:
    """Route minimalpack's own log records to the console.

    Args:
        level: Level applied to the ``minimalpack`` logger and the new handler.
        color: Enable color output when True.
        console: Rich console to write to; see `config_console_handler`.

    Returns:
        The attached handler, so the caller can detach it again with
        ``logging.getLogger("minimalpack").removeHandler(handler)``.
    """
    handler = config_console_handler(level=level, color=color, console=console)
    logger = logging.getLogger(PROJECT_PREFIX)
    logger.setLevel(level)
    logger.addHandler(handler)
    return handler
