# SPDX-License-Identifier: Apache-2.0
"""Logging and trace setup shared by CLI handlers."""

from __future__ import annotations

import logging
import os
import sys

ENV_VERBOSITY = "SITEGLOBE_VERBOSITY"
ENV_TRACE = "SITEGLOBE_SHELL_TRACE"

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "quiet": logging.ERROR,
}


def apply_verbosity_flags(ns: object) -> None:
    """Translate ``--verbose``/``--quiet``/``--trace`` into environment settings."""

    if getattr(ns, "verbose", False):
        os.environ[ENV_VERBOSITY] = "debug"
    elif getattr(ns, "quiet", False):
        os.environ[ENV_VERBOSITY] = "quiet"
    if getattr(ns, "trace", False):
        os.environ[ENV_TRACE] = "1"


def configure_logging_from_env(default: str = "info") -> int:
    """Configure root logging from ``SITEGLOBE_VERBOSITY`` and return the level."""

    verbosity = (os.environ.get(ENV_VERBOSITY) or default).strip().lower()
    level = _LEVELS.get(verbosity, logging.INFO)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    root.setLevel(level)
    return level


def trace_enabled() -> bool:
    return os.environ.get(ENV_TRACE, "").strip().lower() in {"1", "true", "yes"}


def trace(message: str) -> None:
    """Print a shell-style ``+ step`` line to stderr when tracing is on."""

    if trace_enabled():
        print(f"+ {message}", file=sys.stderr)
