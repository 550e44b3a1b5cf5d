"""Logging setup for the RouteOptimize shell.

The shell logs through the ``routeoptimize`` package logger; the root logger
only gets a handler. Level resolution, highest priority first:

  1. ``ROUTEOPT_LOG_LEVEL`` (level name or number)
  2. ``ROUTEOPT_DEBUG`` / ``ROUTEOPT_DEBUG_LOGGING`` truthy -> DEBUG
  3. the ``debug_logging`` shell setting
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

PACKAGE_LOGGER = "routeoptimize"
LEVEL_ENV_VAR = "ROUTEOPT_LOG_LEVEL"
DEBUG_ENV_VARS = ("ROUTEOPT_DEBUG", "ROUTEOPT_DEBUG_LOGGING")
TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"


def is_truthy(value: Any) -> bool:
    """Interpret flags from the environment, CLI overrides or settings payloads."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_VALUES
    return bool(value)


def parse_level(value: Optional[str]) -> Optional[int]:
    text = (value or "").strip()
    if not text:
        return None
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else None


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by ``ROUTEOPT_*`` variables, or ``None`` when unset."""
    env = os.environ if environ is None else environ
    level = parse_level(env.get(LEVEL_ENV_VAR))
    if level is not None:
        return level
    if any(is_truthy(env.get(name)) for name in DEBUG_ENV_VARS):
        return logging.DEBUG
    return None


def env_requests_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    level = env_level(environ)
    return level is not None and level <= logging.DEBUG


def resolve_level(debug_logging: bool, environ: Optional[Mapping[str, str]] = None) -> int:
    level = env_level(environ)
    if level is not None:
        return level
    return logging.DEBUG if debug_logging else logging.INFO


def configure_root(debug_logging: bool = False, *, environ: Optional[Mapping[str, str]] = None) -> int:
    """Install the console handler once and set the shell's log level.

    Returns the level applied to the ``routeoptimize`` logger.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=logging.WARNING, format=_FORMAT, datefmt=_DATEFMT)
    return apply_gui_preferences(debug_logging, environ=environ)


def apply_gui_preferences(debug_logging: bool, *, environ: Optional[Mapping[str, str]] = None) -> int:
    """Re-apply the ``debug_logging`` setting; environment overrides still win."""
    level = resolve_level(debug_logging, environ)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    return level


__all__ = [
    "PACKAGE_LOGGER",
    "apply_gui_preferences",
    "configure_root",
    "env_level",
    "env_requests_debug",
    "is_truthy",
    "parse_level",
    "resolve_level",
]
