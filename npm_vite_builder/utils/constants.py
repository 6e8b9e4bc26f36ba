"""
Shared constants for the npm Vite builder.

Contains common configuration values used across multiple modules.
"""

# Configuration file looked up in the working directory
CONFIG_FILENAME = "npm_vite_build.json"

# Public npm registry metadata endpoint
DEFAULT_REGISTRY_URL = "https://registry.npmjs.org"

# User agent string sent with registry and tarball requests
DEFAULT_USER_AGENT = "npm-vite-builder/1.0"

# Output directory when the config leaves outDir empty
DEFAULT_OUT_DIR = "dist"

# Dist-tag used when no version is requested
DEFAULT_DIST_TAG = "latest"

# Conventional top-level folder inside npm tarballs
PACKAGE_ROOT_DIRNAME = "package"

# Vendor dependency folder skipped during entry discovery
VENDOR_DIRNAME = "node_modules"

# Temp directory prefix and file names inside it
TEMP_DIR_PREFIX = "npm-tgz-"
TARBALL_FILENAME = "pkg.tgz"
EXTRACT_DIRNAME = "extract"
VITE_CONFIG_FILENAME = "vite.config.mjs"

# Bundler command, pinned to the Vite release the config is written for
VITE_VERSION = "5.4.10"
DEFAULT_VITE_COMMAND = ("npx", "--yes", f"vite@{VITE_VERSION}", "build")

# Directory (relative to outDir) receiving every generated file
ASSETS_DIRNAME = "assets"
