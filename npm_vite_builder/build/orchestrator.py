"""
Main build orchestration module.

Runs the pipeline: resolve the release, download and extract the tarball,
discover HTML entries, and hand everything to the bundler.
"""

import os
import tempfile
import time
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import BuildConfig
from ..registry import RegistryResolver, TarballFetcher, extract_tarball
from ..utils.constants import (
    DEFAULT_REGISTRY_URL,
    EXTRACT_DIRNAME,
    TARBALL_FILENAME,
    TEMP_DIR_PREFIX,
)
from ..utils.log import get_logger, print_info, print_status, print_warning
from ..utils.paths import empty_dir, ensure_dir
from .entries import discover_html_entries, resolve_package_root
from .vite import ViteBundler


@dataclass
class BuildResult:
    """Results of a build run."""

    package: str
    version: str
    tarball_url: str
    out_dir: str
    temp_dir: str
    entries: List[str] = field(default_factory=list)
    files_extracted: int = 0
    duration_seconds: float = 0.0


class NpmViteBuilder:
    """
    Builds an npm package's HTML pages with Vite.

    Stages run strictly one after another; any failure aborts the run and
    leaves the temp directory in place.
    """

    def __init__(
        self,
        config: BuildConfig,
        registry_url: str = DEFAULT_REGISTRY_URL,
        bundler: Optional[ViteBundler] = None,
        resolver: Optional[RegistryResolver] = None,
        fetcher: Optional[TarballFetcher] = None
    ):
        """
        Initialize the builder.

        Args:
            config: Loaded build configuration
            registry_url: Registry base URL
            bundler: Bundler to run (default: ViteBundler)
            resolver: Registry resolver (default: one for ``registry_url``)
            fetcher: Tarball fetcher
        """
        self.config = config
        self.out_dir = os.path.abspath(config.out_dir)
        self.resolver = resolver or RegistryResolver(registry_url)
        self.fetcher = fetcher or TarballFetcher()
        self.bundler = bundler or ViteBundler()
        self.logger = get_logger("builder")

    async def build(self) -> BuildResult:
        """
        Run the whole pipeline.

        Returns:
            BuildResult describing the run
        """
        start_time = time.time()
        config = self.config

        print_info(f"Resolving {config.package}@{config.requested_version}...")
        release = await self.resolver.resolve(config.package, config.version)
        print_status(f"  version: {release.version}", "cyan")
        print_status(f"  tarball: {release.tarball_url}", "cyan")

        temp_dir = tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX)
        self.logger.debug(f"Temp directory: {temp_dir}")

        print_info("Downloading tarball...")
        data = await self.fetcher.fetch_to(
            release.tarball_url, os.path.join(temp_dir, TARBALL_FILENAME)
        )

        print_info("Extracting...")
        extract_dir = os.path.join(temp_dir, EXTRACT_DIRNAME)
        ensure_dir(extract_dir)
        files_extracted = extract_tarball(data, extract_dir)
        package_root = resolve_package_root(extract_dir)

        entries = discover_html_entries(package_root)
        if not entries:
            print_warning("No HTML files found. Vite will fall back to its default entry.")
        else:
            self.logger.info(f"Found {len(entries)} HTML entries")

        empty_dir(self.out_dir)

        print_info("Vite build...")
        await self.bundler.build(
            package_root,
            entries,
            self.out_dir,
            config.externalize_bare_imports,
            temp_dir,
        )

        return BuildResult(
            package=config.package,
            version=release.version,
            tarball_url=release.tarball_url,
            out_dir=self.out_dir,
            temp_dir=temp_dir,
            entries=entries,
            files_extracted=files_extracted,
            duration_seconds=time.time() - start_time,
        )
