"""
Path utilities for the npm Vite builder.

Provides directory management and archive path mapping.
"""

import os
import shutil
from typing import List


def ensure_dir(path: str) -> None:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists
    """
    os.makedirs(path, exist_ok=True)


def ensure_parent_dir(file_path: str) -> None:
    """
    Ensure the parent directory of a file exists.

    Args:
        file_path: File path whose parent directory should exist
    """
    parent = os.path.dirname(file_path)
    if parent:
        ensure_dir(parent)


def empty_dir(path: str) -> None:
    """
    Remove everything inside a directory while keeping the directory itself.

    The directory is created when it does not exist yet.

    Args:
        path: Directory to empty
    """
    if not os.path.isdir(path):
        ensure_dir(path)
        return

    for name in os.listdir(path):
        child = os.path.join(path, name)
        if os.path.isdir(child) and not os.path.islink(child):
            shutil.rmtree(child)
        else:
            os.remove(child)


def path_segments(path: str) -> List[str]:
    """
    Split a relative path on both POSIX and Windows separators.

    Args:
        path: Relative path

    Returns:
        Non-empty path segments
    """
    return [part for part in path.replace('\\', '/').split('/') if part]


def safe_join(base_dir: str, member_name: str) -> str:
    """
    Map an archive member name onto a path below ``base_dir``.

    Args:
        base_dir: Destination root
        member_name: Member name as stored in the archive

    Returns:
        Absolute destination path

    Raises:
        ValueError: If the member would land outside ``base_dir``
    """
    base = os.path.abspath(base_dir)
    target = os.path.abspath(os.path.join(base, *path_segments(member_name)))

    if os.path.isabs(member_name) or os.path.commonpath([base, target]) != base:
        raise ValueError(f"Archive member escapes destination: {member_name}")

    return target
