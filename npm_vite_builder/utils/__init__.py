"""
Utility modules for the npm Vite builder.

Contains logging, path handling, and constants.
"""

from .log import setup_logger, get_logger
from .paths import ensure_dir, ensure_parent_dir, empty_dir
from .constants import (
    CONFIG_FILENAME,
    DEFAULT_REGISTRY_URL,
    DEFAULT_USER_AGENT,
    DEFAULT_OUT_DIR,
    VENDOR_DIRNAME,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "ensure_dir",
    "ensure_parent_dir",
    "empty_dir",
    "CONFIG_FILENAME",
    "DEFAULT_REGISTRY_URL",
    "DEFAULT_USER_AGENT",
    "DEFAULT_OUT_DIR",
    "VENDOR_DIRNAME",
]
