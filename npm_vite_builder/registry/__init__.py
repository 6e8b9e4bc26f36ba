"""
Registry module for fetching npm packages.

Contains components for resolving versions, downloading and extracting tarballs.
"""

from .resolver import RegistryResolver, RegistryMetadata, ResolvedRelease, select_release
from .fetcher import TarballFetcher
from .extractor import extract_tarball

__all__ = [
    "RegistryResolver",
    "RegistryMetadata",
    "ResolvedRelease",
    "select_release",
    "TarballFetcher",
    "extract_tarball",
]
