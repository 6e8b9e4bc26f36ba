"""
Build module for running Vite over an extracted package.

Contains entry discovery, externalization and naming rules, the Vite runner,
and the pipeline orchestrator.
"""

from .entries import discover_html_entries, resolve_package_root
from .externals import is_external
from .naming import entry_file_name, chunk_file_name, asset_file_name
from .vite import ViteBundler
from .orchestrator import NpmViteBuilder, BuildResult

__all__ = [
    "discover_html_entries",
    "resolve_package_root",
    "is_external",
    "entry_file_name",
    "chunk_file_name",
    "asset_file_name",
    "ViteBundler",
    "NpmViteBuilder",
    "BuildResult",
]
