"""
npm Vite Builder - build an npm package's HTML pages with Vite.

This package resolves a package release from the npm registry, downloads and
extracts its tarball, and runs Vite over the HTML entry points it contains.
"""

__version__ = "1.0.0"
__author__ = "npm Vite Builder Team"
