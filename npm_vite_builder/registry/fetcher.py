"""
Tarball fetcher for downloading package archives.

Uses aiohttp; a failed download is fatal and never retried.
"""

import aiohttp

from ..errors import DownloadFailed
from ..utils.constants import DEFAULT_USER_AGENT
from ..utils.log import get_logger
from ..utils.paths import ensure_parent_dir


class TarballFetcher:
    """
    Downloads package tarballs.
    """

    def __init__(self, user_agent: str = DEFAULT_USER_AGENT):
        """
        Initialize the fetcher.

        Args:
            user_agent: User agent string for requests
        """
        self.user_agent = user_agent
        self.logger = get_logger("fetcher")

    async def fetch(self, url: str) -> bytes:
        """
        Download a tarball into memory.

        Args:
            url: Tarball URL

        Returns:
            The complete response body

        Raises:
            DownloadFailed: On a non-2xx response
        """
        async with aiohttp.ClientSession(headers={"User-Agent": self.user_agent}) as session:
            async with session.get(url, allow_redirects=True) as response:
                if not 200 <= response.status < 300:
                    raise DownloadFailed(url, response.status, response.reason)
                content = await response.read()

        self.logger.debug(f"Downloaded {len(content)} bytes from {url}")
        return content

    async def fetch_to(self, url: str, local_path: str) -> bytes:
        """
        Download a tarball and keep a copy on disk.

        Args:
            url: Tarball URL
            local_path: File to write the archive to

        Returns:
            The downloaded bytes
        """
        content = await self.fetch(url)

        ensure_parent_dir(local_path)
        with open(local_path, 'wb') as f:
            f.write(content)

        self.logger.debug(f"Saved tarball: {url} -> {local_path}")
        return content
