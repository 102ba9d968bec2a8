#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Path helpers for configuration file names."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def expand_tilde(filename: str) -> str:
    """Expand a leading ``~/`` or ``~user/`` in ``filename``.

    ``~/`` uses ``$HOME``; ``~user`` uses the password database where the
    platform has one. Names that cannot be expanded are returned unchanged.

    Examples
    --------
    >>> expand_tilde("/etc/tidyrc")
    '/etc/tidyrc'

    """
    if not filename.startswith("~"):
        return filename

    if filename.startswith("~/"):
        home = os.environ.get("HOME")
        return home + filename[1:] if home else filename

    expanded = os.path.expanduser(filename)
    if expanded == filename:
        logger.debug("Could not expand user in %s", filename)
    return expanded


def file_exists(filename: str | Path) -> bool:
    """Return True if ``filename`` (after tilde expansion) exists."""
    return Path(expand_tilde(str(filename))).exists()
