# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich-backed logging setup for FDO servers embedding these helpers."""

from __future__ import annotations

import logging
import sys
from typing import Final, Literal

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME: Final[str] = "fdo_util"


def detect_tty() -> bool:
    """Return ``True`` when stderr appears to be backed by a terminal."""

    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


def build_console(*, color: bool) -> Console:
    """Return a stderr console honouring ``color`` only when attached to a TTY."""

    tty = detect_tty()
    color_system: Literal["auto", "standard", "256", "truecolor", "windows"] | None = "auto" if color and tty else None
    return Console(
        stderr=True,
        color_system=color_system,
        force_terminal=tty,
        no_color=not (color and tty),
        soft_wrap=True,
    )


def configure_logging(
    level: int | str = logging.INFO,
    *,
    use_color: bool | None = None,
    logger_name: str = ROOT_LOGGER_NAME,
) -> logging.Logger:
    """Attach a single :class:`~rich.logging.RichHandler` to ``logger_name``.

    Repeated calls replace the handler installed by an earlier call rather
    than stacking a new one.

    Args:
        level: Logging level applied to the logger.
        use_color: Explicit colour preference; ``None`` follows TTY detection.
        logger_name: Logger to configure.

    Returns:
        logging.Logger: The configured logger.
    """

    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    color = detect_tty() if use_color is None else use_color
    handler = RichHandler(
        console=build_console(color=color),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "build_console", "configure_logging", "detect_tty"]
