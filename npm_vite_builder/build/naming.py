"""
Output file naming for the Vite build.

Scripts land at ``assets/<chunk name>.js`` and other assets keep their
original file name under ``assets/``. Content hashes are never added.
"""

import json
import re
from typing import Optional

from ..utils.constants import ASSETS_DIRNAME

# Final extension of a file name, e.g. ".png" in "logo.png"
EXTENSION_PATTERN = r'\.[^./\\]+$'
DEFAULT_ASSET_EXTENSION = ".bin"

_extension = re.compile(EXTENSION_PATTERN)


def entry_file_name(chunk_name: Optional[str]) -> str:
    """Output path of an entry chunk."""
    return f"{ASSETS_DIRNAME}/{chunk_name or 'entry'}.js"


def chunk_file_name(chunk_name: Optional[str]) -> str:
    """Output path of a shared chunk."""
    return f"{ASSETS_DIRNAME}/{chunk_name or 'chunk'}.js"


def asset_file_name(asset_name: Optional[str]) -> str:
    """
    Output path of a non-script asset.

    Args:
        asset_name: Original asset file name, if the bundler knows it

    Returns:
        ``assets/<stem><ext>``; assets without a name become ``asset`` and
        missing extensions become ``.bin``, so an empty name gives ``.bin``
    """
    if not isinstance(asset_name, str):
        return f"{ASSETS_DIRNAME}/asset{DEFAULT_ASSET_EXTENSION}"

    match = _extension.search(asset_name)
    ext = match.group(0) if match else DEFAULT_ASSET_EXTENSION
    stem = _extension.sub("", asset_name)
    return f"{ASSETS_DIRNAME}/{stem}{ext}"


def render_output_js() -> str:
    """
    Render the naming rules as Rollup ``output`` options in JavaScript.
    """
    assets = json.dumps(f"{ASSETS_DIRNAME}/")
    extension = f"new RegExp({json.dumps(EXTENSION_PATTERN)})"
    return (
        "{\n"
        f"  entryFileNames: (chunk) => {assets} + (chunk.name || \"entry\") + \".js\",\n"
        f"  chunkFileNames: (chunk) => {assets} + (chunk.name || \"chunk\") + \".js\",\n"
        "  assetFileNames: (asset) => {\n"
        "    const name = asset.name;\n"
        "    if (typeof name !== \"string\") "
        f"return {assets} + \"asset\" + {json.dumps(DEFAULT_ASSET_EXTENSION)};\n"
        f"    const match = name.match({extension});\n"
        f"    const ext = match ? match[0] : {json.dumps(DEFAULT_ASSET_EXTENSION)};\n"
        f"    return {assets} + name.replace({extension}, \"\") + ext;\n"
        "  },\n"
        "}"
    )
