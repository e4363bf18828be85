"""Elevated-privilege precondition for full-disk scans."""

from __future__ import annotations

import logging
import os
import sys

log = logging.getLogger(__name__)


def is_root() -> bool:
    """Check if the current process is running as root."""
    return os.geteuid() == 0


def is_windows_admin() -> bool:
    """Check if the current process holds a Windows administrator token."""
    import ctypes

    try:
        return bool(ctypes.windll.shell32.IsUserAnAdmin())
    except (AttributeError, OSError):
        log.debug("IsUserAnAdmin is unavailable")
        return False


def is_elevated() -> bool:
    """Check if the process runs with administrative privileges."""
    if sys.platform == "win32":
        return is_windows_admin()
    return is_root()
