"""Tests for registry resolution and tarball download.

HTTP is served by a local aiohttp test server; no real registry is contacted.
"""

import pytest
from aiohttp import web

from npm_vite_builder.errors import DownloadFailed, RegistryUnreachable, TarballNotFound
from npm_vite_builder.registry import (
    RegistryMetadata,
    RegistryResolver,
    ResolvedRelease,
    TarballFetcher,
    select_release,
)


@pytest.fixture
def metadata():
    return RegistryMetadata.from_json({
        "dist-tags": {"latest": "2.0.0", "next": "3.0.0-beta.1"},
        "versions": {
            "1.0.0": {"dist": {"tarball": "https://x/1.tgz"}},
            "2.0.0": {"dist": {"tarball": "https://x/y.tgz"}},
            "3.0.0-beta.1": {"dist": {}},
            "0.9.0": {},
        },
    })


class TestRegistryMetadata:
    def test_parses_tags_and_tarballs(self, metadata):
        assert metadata.dist_tags["latest"] == "2.0.0"
        assert metadata.versions["1.0.0"] == "https://x/1.tgz"
        assert metadata.versions["3.0.0-beta.1"] is None
        assert metadata.versions["0.9.0"] is None

    def test_tolerates_missing_sections(self):
        metadata = RegistryMetadata.from_json({})
        assert metadata.dist_tags == {}
        assert metadata.versions == {}

    @pytest.mark.parametrize("data", [
        {"dist-tags": {"latest": "1"}, "versions": ["1"]},
        {"dist-tags": ["latest"], "versions": {"1": {"dist": {"tarball": "https://x/1.tgz"}}}},
        ["not", "an", "object"],
        "plain string",
        None,
    ])
    def test_malformed_body_resolves_to_tarball_not_found(self, data):
        metadata = RegistryMetadata.from_json(data)
        with pytest.raises(TarballNotFound):
            select_release(metadata, "pkg")

    @pytest.mark.asyncio
    async def test_malformed_registry_response_raises_tarball_not_found(self, serve_app):
        async def metadata(request):
            return web.json_response({"dist-tags": {"latest": "1"}, "versions": ["1"]})

        app = web.Application()
        app.router.add_get("/pkg", metadata)

        async with serve_app(app) as server:
            resolver = RegistryResolver(str(server.make_url("/")).rstrip("/"))
            with pytest.raises(TarballNotFound):
                await resolver.resolve("pkg")


class TestSelectRelease:
    def test_latest_when_no_version_requested(self, metadata):
        assert select_release(metadata, "pkg") == ResolvedRelease("2.0.0", "https://x/y.tgz")
        assert select_release(metadata, "pkg", "") == ResolvedRelease("2.0.0", "https://x/y.tgz")

    def test_blank_version_means_latest(self, metadata):
        assert select_release(metadata, "pkg", "   ").version == "2.0.0"

    def test_explicit_version_used(self, metadata):
        release = select_release(metadata, "pkg", "1.0.0")
        assert release.version == "1.0.0"
        assert release.tarball_url == "https://x/1.tgz"

    def test_version_without_tarball_raises(self, metadata):
        with pytest.raises(TarballNotFound) as exc_info:
            select_release(metadata, "pkg", "3.0.0-beta.1")
        assert "pkg@3.0.0-beta.1" in str(exc_info.value)

    def test_unknown_version_raises(self, metadata):
        with pytest.raises(TarballNotFound):
            select_release(metadata, "pkg", "9.9.9")

    def test_missing_latest_tag_raises(self):
        with pytest.raises(TarballNotFound):
            select_release(RegistryMetadata(), "pkg")


class TestRegistryResolver:
    def test_metadata_url_encodes_scoped_names(self):
        resolver = RegistryResolver("https://registry.example/")
        assert resolver.metadata_url("left-pad") == "https://registry.example/left-pad"
        assert resolver.metadata_url("@scope/pkg") == "https://registry.example/%40scope%2Fpkg"

    @pytest.mark.asyncio
    async def test_resolves_latest(self, stub_registry):
        async with stub_registry("left-pad", {"1.2.0": b"a", "1.3.0": b"b"}) as registry:
            release = await RegistryResolver(registry.url).resolve("left-pad")

        assert release.version == "1.3.0"
        assert release.tarball_url == f"{registry.url}/tarballs/1.3.0.tgz"
        assert registry.requests == ["/left-pad"]

    @pytest.mark.asyncio
    async def test_resolves_requested_version(self, stub_registry):
        async with stub_registry("left-pad", {"1.2.0": b"a", "1.3.0": b"b"}) as registry:
            release = await RegistryResolver(registry.url).resolve("left-pad", "1.2.0")

        assert release.version == "1.2.0"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [404, 500, 503])
    async def test_non_2xx_raises_unreachable(self, stub_registry, status):
        async with stub_registry("left-pad", {"1.3.0": b""}, status=status) as registry:
            with pytest.raises(RegistryUnreachable) as exc_info:
                await RegistryResolver(registry.url).resolve("left-pad")

        assert exc_info.value.status == status
        assert str(status) in str(exc_info.value)


class TestTarballFetcher:
    @pytest.mark.asyncio
    async def test_fetch_returns_body(self, stub_registry):
        async with stub_registry("left-pad", {"1.3.0": b"tarball-bytes"}) as registry:
            data = await TarballFetcher().fetch(f"{registry.url}/tarballs/1.3.0.tgz")

        assert data == b"tarball-bytes"

    @pytest.mark.asyncio
    async def test_fetch_to_keeps_copy(self, stub_registry, tmp_path):
        target = tmp_path / "tmp" / "pkg.tgz"
        async with stub_registry("left-pad", {"1.3.0": b"tarball-bytes"}) as registry:
            data = await TarballFetcher().fetch_to(
                f"{registry.url}/tarballs/1.3.0.tgz", str(target)
            )

        assert data == b"tarball-bytes"
        assert target.read_bytes() == b"tarball-bytes"

    @pytest.mark.asyncio
    async def test_missing_tarball_raises_download_failed(self, stub_registry):
        async with stub_registry("left-pad", {"1.3.0": b""}) as registry:
            with pytest.raises(DownloadFailed) as exc_info:
                await TarballFetcher().fetch(f"{registry.url}/tarballs/0.0.1.tgz")

        assert exc_info.value.status == 404
        assert exc_info.value.reason == "Not Found"

    @pytest.mark.asyncio
    async def test_no_retry_after_failure(self, serve_app):
        hits = []

        async def flaky(request):
            hits.append(request.path)
            return web.Response(status=502)

        app = web.Application()
        app.router.add_get("/pkg.tgz", flaky)

        async with serve_app(app) as server:
            with pytest.raises(DownloadFailed):
                await TarballFetcher().fetch(str(server.make_url("/pkg.tgz")))

        assert hits == ["/pkg.tgz"]
