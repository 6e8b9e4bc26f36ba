"""
Vite bundler invocation.

Writes a Vite config module for the extracted package and runs
``vite build`` against it in a subprocess.
"""

import asyncio
import json
import os
from typing import List, Sequence

from ..errors import BundlerFailed
from ..utils.constants import DEFAULT_VITE_COMMAND, VITE_CONFIG_FILENAME
from ..utils.log import get_logger
from .externals import render_external_js
from .naming import render_output_js


def _indent(block: str, spaces: int) -> str:
    """Indent every line after the first."""
    pad = " " * spaces
    return block.replace("\n", "\n" + pad)


class ViteBundler:
    """
    Runs Vite with the builder's fixed configuration.
    """

    def __init__(self, command: Sequence[str] = DEFAULT_VITE_COMMAND):
        """
        Initialize the bundler.

        Args:
            command: Command line that runs ``vite build``; ``--config`` is
                appended to it
        """
        self.command = list(command)
        self.logger = get_logger("vite")

    def render_config(
        self,
        root: str,
        entries: List[str],
        out_dir: str,
        externalize_bare_imports: bool = True
    ) -> str:
        """
        Render the Vite config module.

        Args:
            root: Package root, used as the Vite project root
            entries: HTML entry points; Vite's default applies when empty
            out_dir: Absolute output directory
            externalize_bare_imports: Whether bare imports stay external

        Returns:
            JavaScript source of an ES module exporting the config
        """
        rollup_lines = []
        if entries:
            rollup_lines.append(f"input: {json.dumps(entries, indent=2)},")
        if externalize_bare_imports:
            rollup_lines.append(f"external: {render_external_js()},")
        rollup_lines.append(f"output: {render_output_js()},")
        rollup_options = _indent("\n".join(rollup_lines), 6)

        return (
            "// Generated by npm-vite-builder\n"
            "export default {\n"
            f"  root: {json.dumps(root)},\n"
            "  logLevel: \"info\",\n"
            "  build: {\n"
            f"    outDir: {json.dumps(out_dir)},\n"
            "    emptyOutDir: false,\n"
            "    sourcemap: false,\n"
            "    cssCodeSplit: true,\n"
            "    manifest: false,\n"
            "    modulePreload: false,\n"
            "    rollupOptions: {\n"
            f"      {rollup_options}\n"
            "    },\n"
            "  },\n"
            "};\n"
        )

    def write_config(
        self,
        work_dir: str,
        root: str,
        entries: List[str],
        out_dir: str,
        externalize_bare_imports: bool = True
    ) -> str:
        """
        Write the config module into ``work_dir``.

        Returns:
            Path of the written config file
        """
        config_path = os.path.join(work_dir, VITE_CONFIG_FILENAME)
        with open(config_path, 'w', encoding='utf-8') as f:
            f.write(self.render_config(root, entries, out_dir, externalize_bare_imports))

        self.logger.debug(f"Wrote Vite config: {config_path}")
        return config_path

    async def build(
        self,
        root: str,
        entries: List[str],
        out_dir: str,
        externalize_bare_imports: bool,
        work_dir: str
    ) -> None:
        """
        Run ``vite build`` for the package.

        Vite's own output goes straight to the terminal.

        Args:
            root: Package root
            entries: HTML entry points
            out_dir: Absolute output directory (already emptied)
            externalize_bare_imports: Whether bare imports stay external
            work_dir: Scratch directory for the generated config

        Raises:
            BundlerFailed: If Vite cannot be started or exits non-zero
        """
        config_path = self.write_config(
            work_dir, root, entries, out_dir, externalize_bare_imports
        )
        cmd = self.command + ["--config", config_path]
        self.logger.debug(f"Running: {' '.join(cmd)}")

        try:
            process = await asyncio.create_subprocess_exec(*cmd, cwd=root)
        except FileNotFoundError as e:
            raise BundlerFailed(f"Bundler command not found: {cmd[0]}") from e

        returncode = await process.wait()
        if returncode != 0:
            raise BundlerFailed(f"Vite build failed with exit code {returncode}", returncode)
