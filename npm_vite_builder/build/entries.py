"""
HTML entry point discovery.

Vite treats every HTML file it is given as a page entry; this module finds
them inside an extracted package.
"""

import os
import re
from typing import List

from ..utils.constants import PACKAGE_ROOT_DIRNAME, VENDOR_DIRNAME
from ..utils.log import get_logger

HTML_PATTERN = re.compile(r'\.html?$', re.IGNORECASE)

logger = get_logger("entries")


def is_html_path(path: str) -> bool:
    """Check whether a path names an ``.htm``/``.html`` file."""
    return bool(HTML_PATTERN.search(path))


def resolve_package_root(extract_dir: str) -> str:
    """
    Locate the package root inside an extraction directory.

    npm tarballs wrap their content in a top-level ``package/`` folder;
    archives without it are used as-is.

    Args:
        extract_dir: Directory the tarball was extracted into

    Returns:
        Package root directory
    """
    candidate = os.path.join(extract_dir, PACKAGE_ROOT_DIRNAME)
    if os.path.isdir(candidate):
        return candidate
    return extract_dir


def discover_html_entries(root: str) -> List[str]:
    """
    Collect HTML files below ``root``, skipping ``node_modules`` trees.

    Args:
        root: Package root directory

    Returns:
        Absolute paths in traversal order
    """
    root = os.path.abspath(root)
    entries: List[str] = []

    for dirpath, dirnames, filenames in os.walk(root, followlinks=False):
        # Prune vendored dependencies at any depth
        dirnames[:] = [d for d in dirnames if d != VENDOR_DIRNAME]

        for filename in filenames:
            if is_html_path(filename):
                entries.append(os.path.join(dirpath, filename))

    logger.debug(f"Found {len(entries)} HTML entries under {root}")
    return entries
