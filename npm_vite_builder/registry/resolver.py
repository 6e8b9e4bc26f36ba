"""
npm registry resolver.

Looks up a package's registry metadata and picks the tarball URL for the
requested version, or for the ``latest`` dist-tag when none was requested.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import quote

import aiohttp

from ..errors import RegistryUnreachable, TarballNotFound
from ..utils.constants import DEFAULT_DIST_TAG, DEFAULT_REGISTRY_URL, DEFAULT_USER_AGENT
from ..utils.log import get_logger


@dataclass
class RegistryMetadata:
    """The parts of a registry packument the builder needs."""

    dist_tags: Dict[str, str] = field(default_factory=dict)
    versions: Dict[str, Optional[str]] = field(default_factory=dict)  # version -> tarball URL

    @classmethod
    def from_json(cls, data: dict) -> "RegistryMetadata":
        """
        Parse the registry JSON document.

        Args:
            data: Decoded ``GET /<package>`` response body

        Returns:
            RegistryMetadata instance
        """
        if not isinstance(data, dict):
            return cls()

        versions: Dict[str, Optional[str]] = {}
        raw_versions = data.get("versions")
        if isinstance(raw_versions, dict):
            for version, manifest in raw_versions.items():
                dist = manifest.get("dist") if isinstance(manifest, dict) else None
                versions[version] = dist.get("tarball") if isinstance(dist, dict) else None

        dist_tags = data.get("dist-tags")
        return cls(
            dist_tags=dict(dist_tags) if isinstance(dist_tags, dict) else {},
            versions=versions,
        )


@dataclass(frozen=True)
class ResolvedRelease:
    """A concrete version and the archive to download for it."""

    version: str
    tarball_url: str


def select_release(
    metadata: RegistryMetadata,
    package: str,
    version: Optional[str] = None
) -> ResolvedRelease:
    """
    Pick the release to build.

    A non-blank ``version`` is used verbatim; otherwise the ``latest``
    dist-tag decides.

    Args:
        metadata: Parsed registry metadata
        package: Package name, used in error messages
        version: Requested version, empty for latest

    Returns:
        ResolvedRelease for the selected version

    Raises:
        TarballNotFound: If the version has no tarball URL
    """
    if version and version.strip():
        selected = version
    else:
        selected = metadata.dist_tags.get(DEFAULT_DIST_TAG)

    tarball = metadata.versions.get(selected) if isinstance(selected, str) else None
    if not tarball:
        raise TarballNotFound(package, str(selected))

    return ResolvedRelease(version=selected, tarball_url=tarball)


class RegistryResolver:
    """
    Resolves package versions against an npm-compatible registry.
    """

    def __init__(
        self,
        registry_url: str = DEFAULT_REGISTRY_URL,
        user_agent: str = DEFAULT_USER_AGENT
    ):
        """
        Initialize the resolver.

        Args:
            registry_url: Registry base URL
            user_agent: User agent string for requests
        """
        self.registry_url = registry_url.rstrip('/')
        self.user_agent = user_agent
        self.logger = get_logger("registry")

    def metadata_url(self, package: str) -> str:
        """Return the metadata endpoint for a package."""
        return f"{self.registry_url}/{quote(package, safe='')}"

    async def fetch_metadata(self, package: str) -> RegistryMetadata:
        """
        Fetch and parse the registry metadata of a package.

        Args:
            package: Package name (scoped names are URL-encoded)

        Returns:
            RegistryMetadata

        Raises:
            RegistryUnreachable: On a non-2xx response
        """
        url = self.metadata_url(package)
        self.logger.debug(f"GET {url}")

        async with aiohttp.ClientSession(headers={"User-Agent": self.user_agent}) as session:
            async with session.get(url, allow_redirects=True) as response:
                if not 200 <= response.status < 300:
                    raise RegistryUnreachable(url, response.status, response.reason)
                data = await response.json(content_type=None)

        return RegistryMetadata.from_json(data)

    async def resolve(self, package: str, version: Optional[str] = None) -> ResolvedRelease:
        """
        Resolve a package version to its tarball URL.

        Args:
            package: Package name
            version: Requested version, empty for the ``latest`` dist-tag

        Returns:
            ResolvedRelease
        """
        metadata = await self.fetch_metadata(package)
        release = select_release(metadata, package, version)
        self.logger.debug(f"Resolved {package}@{release.version} -> {release.tarball_url}")
        return release
