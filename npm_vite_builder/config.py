"""
Build configuration loading.

Reads ``npm_vite_build.json`` from the working directory:

    {
      "package": "left-pad",
      "version": "1.3.0",
      "outDir": "dist",
      "externalizeBareImports": true
    }

Only ``package`` is required.
"""

import json
import os
from dataclasses import dataclass
from typing import Optional

from .errors import ConfigInvalid, ConfigNotFound
from .utils.constants import CONFIG_FILENAME, DEFAULT_OUT_DIR
from .utils.log import get_logger

logger = get_logger("config")


@dataclass(frozen=True)
class BuildConfig:
    """Validated, fully defaulted build configuration."""

    package: str
    version: str = ""
    out_dir: str = DEFAULT_OUT_DIR
    externalize_bare_imports: bool = True

    @property
    def requested_version(self) -> str:
        """Version label for progress output."""
        return self.version or "latest"

    @classmethod
    def from_dict(cls, data: dict, source: str = CONFIG_FILENAME) -> "BuildConfig":
        """
        Build a config from the parsed JSON object.

        Args:
            data: Parsed JSON content
            source: File the data came from, used in error messages

        Returns:
            BuildConfig with defaults applied

        Raises:
            ConfigInvalid: If ``package`` is missing or not a string
        """
        if not isinstance(data, dict):
            raise ConfigInvalid(f"Expected a JSON object in {source}")

        package = data.get("package")
        if not package or not isinstance(package, str):
            raise ConfigInvalid(f'Missing or invalid "package" field in {source}')

        externalize = data.get("externalizeBareImports")

        return cls(
            package=package,
            version=str(data.get("version") or ""),
            out_dir=str(data.get("outDir") or DEFAULT_OUT_DIR),
            externalize_bare_imports=True if externalize is None else bool(externalize),
        )


def load_config(path: Optional[str] = None) -> BuildConfig:
    """
    Load the build configuration file.

    Args:
        path: Config file path (default: ``npm_vite_build.json`` in the
            working directory)

    Returns:
        Validated BuildConfig

    Raises:
        ConfigNotFound: If the file cannot be read
        ConfigInvalid: If the file is not valid JSON or lacks ``package``
    """
    config_path = os.path.abspath(path or CONFIG_FILENAME)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except OSError as e:
        raise ConfigNotFound(config_path) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigInvalid(f"Invalid JSON in {config_path}: {e}") from e

    config = BuildConfig.from_dict(data, source=config_path)
    logger.debug(f"Loaded config from {config_path}: {config}")
    return config
