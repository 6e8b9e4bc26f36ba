"""
Error types raised by the npm Vite builder.

Every error is fatal for the run; they propagate to ``main()`` which reports
them and exits with status 1.
"""

from typing import Optional


class NpmViteBuildError(Exception):
    """Base class for all build pipeline errors."""


class ConfigNotFound(NpmViteBuildError):
    """The configuration file could not be read."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Config not found: {path}")


class ConfigInvalid(NpmViteBuildError):
    """The configuration file is not usable."""


class HTTPStatusError(NpmViteBuildError):
    """A request returned a non-2xx status."""

    action = "Request"

    def __init__(self, url: str, status: int, reason: Optional[str] = None):
        self.url = url
        self.status = status
        self.reason = reason or ""
        super().__init__(f"{self.action} failed: {status} {self.reason}".rstrip())


class RegistryUnreachable(HTTPStatusError):
    """The registry metadata request failed."""

    action = "Registry fetch"


class DownloadFailed(HTTPStatusError):
    """The tarball download failed."""

    action = "Download"


class TarballNotFound(NpmViteBuildError):
    """The resolved version has no tarball in the registry metadata."""

    def __init__(self, package: str, version: str):
        self.package = package
        self.version = version
        super().__init__(f"Tarball not found for {package}@{version}")


class ArchiveError(NpmViteBuildError):
    """The tarball holds an entry that cannot be extracted safely."""


class BundlerFailed(NpmViteBuildError):
    """The bundler process could not be started or exited non-zero."""

    def __init__(self, message: str, returncode: Optional[int] = None):
        self.returncode = returncode
        super().__init__(message)
