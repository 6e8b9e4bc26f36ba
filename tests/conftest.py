"""Shared fixtures: in-memory tarballs, a stub npm registry, a fake bundler."""

import io
import os
import tarfile
from contextlib import asynccontextmanager
from types import SimpleNamespace

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer


def build_tgz(files=None, dirs=(), symlinks=None):
    """Build a gzip-compressed tar archive in memory.

    ``files`` maps member names to bytes, ``symlinks`` maps link names to
    their targets. Members are written in the order given.
    """
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w:gz") as tar:
        for name in dirs:
            info = tarfile.TarInfo(name=name)
            info.type = tarfile.DIRTYPE
            info.mode = 0o755
            tar.addfile(info)
        for name, content in (files or {}).items():
            info = tarfile.TarInfo(name=name)
            info.size = len(content)
            tar.addfile(info, io.BytesIO(content))
        for name, target in (symlinks or {}).items():
            info = tarfile.TarInfo(name=name)
            info.type = tarfile.SYMTYPE
            info.linkname = target
            tar.addfile(info)
    return buffer.getvalue()


@pytest.fixture
def make_tgz():
    return build_tgz


@pytest.fixture
def minimal_package_tgz():
    """A package shaped like ``npm pack`` output with one HTML page."""
    return build_tgz({
        "package/package.json": b'{"name": "left-pad", "version": "1.3.0"}',
        "package/index.html": b'<!doctype html><script type="module" src="./index.js"></script>',
        "package/index.js": b"export default function leftPad() {}\n",
    })


@asynccontextmanager
async def _serve(app):
    server = TestServer(app)
    await server.start_server()
    try:
        yield server
    finally:
        await server.close()


@pytest.fixture
def stub_registry():
    """Factory for a registry serving one package and its tarballs.

    Usage::

        async with stub_registry("left-pad", {"1.3.0": data}) as registry:
            registry.url, registry.requests
    """

    @asynccontextmanager
    async def factory(package, tarballs, latest=None, status=200):
        requests = []

        async def metadata(request):
            requests.append(request.path)
            if status != 200:
                return web.Response(status=status)
            origin = str(request.url.origin())
            versions = {
                version: {"dist": {"tarball": f"{origin}/tarballs/{version}.tgz"}}
                for version in tarballs
            }
            return web.json_response({
                "name": package,
                "dist-tags": {"latest": latest or list(tarballs)[-1]},
                "versions": versions,
            })

        async def tarball(request):
            requests.append(request.path)
            version = request.match_info["version"]
            if version not in tarballs:
                return web.Response(status=404, reason="Not Found")
            return web.Response(body=tarballs[version], content_type="application/octet-stream")

        app = web.Application()
        app.router.add_get("/tarballs/{version}.tgz", tarball)
        app.router.add_get("/{name}", metadata)

        async with _serve(app) as server:
            yield SimpleNamespace(
                url=str(server.make_url("/")).rstrip("/"),
                requests=requests,
                server=server,
            )

    return factory


@pytest.fixture
def serve_app():
    """Serve an arbitrary aiohttp application for the duration of a block."""
    return _serve


class FakeBundler:
    """Stands in for ViteBundler; records calls and writes one script."""

    def __init__(self):
        self.calls = []

    async def build(self, root, entries, out_dir, externalize_bare_imports, work_dir):
        self.calls.append({
            "root": root,
            "entries": list(entries),
            "out_dir": out_dir,
            "externalize_bare_imports": externalize_bare_imports,
            "work_dir": work_dir,
            "out_dir_contents": sorted(os.listdir(out_dir)),
        })
        assets_dir = os.path.join(out_dir, "assets")
        os.makedirs(assets_dir, exist_ok=True)
        with open(os.path.join(assets_dir, "main.js"), "w", encoding="utf-8") as f:
            f.write("console.log('built');\n")


@pytest.fixture
def fake_bundler():
    return FakeBundler()
