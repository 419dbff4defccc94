# src/agent/logging_config.py
"""
Central logging configuration for the maze navigator.

Call configure_logging() once from an entrypoint, for example:

    from agent.logging_config import configure_logging
    from env.loader import load_config

    configure_logging(load_config())

After that, pathfinder and mover diagnostics (maze_core.nav.*) are visible
on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Union

from env.loader import log_level
from env.schema import MazeConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Union[int, MazeConfig] = logging.INFO) -> None:
    """
    Configure root logging if no handlers are attached yet.

    Args:
        level: a logging level (e.g. logging.DEBUG) or a MazeConfig whose
            `logging.level` is used.
    """
    if isinstance(level, MazeConfig):
        level = log_level(level)

    root = logging.getLogger()

    # Don't duplicate handlers if someone already configured logging.
    if root.handlers:
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
