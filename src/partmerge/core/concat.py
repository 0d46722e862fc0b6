"""Concatenation through ffmpeg's concat demuxer.

For each group a temporary manifest is written with one ``file '<name>'``
record per part, then ffmpeg copies the streams (no re-encoding) into the
output file. The manifest is removed whatever happens to the subprocess.
"""

from __future__ import annotations

import logging
import os
import subprocess
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from partmerge.core.models import MergeGroup, MergeResult
from partmerge.shared.constants import ConcatDefaults
from partmerge.shared.errors import create_tool_missing_error

logger = logging.getLogger(__name__)


def escape_manifest_name(name: str) -> str:
    """Escape single quotes for ffmpeg's concat format."""
    return name.replace("'", "'\\''")


def format_manifest(names: list[str]) -> str:
    """Render manifest records, one per line, in the given order."""
    directive = ConcatDefaults.MANIFEST_DIRECTIVE
    return "".join(f"{directive} '{escape_manifest_name(name)}'\n" for name in names)


class ConcatRunner:
    """Runs the concatenation tool for one group at a time.

    Args:
        binary: ffmpeg executable name or path
        overwrite: Whether existing outputs may be replaced (``-y``);
                   otherwise ffmpeg refuses them (``-n``)
    """

    def __init__(self, binary: str = ConcatDefaults.BINARY, *, overwrite: bool = False) -> None:
        self.binary = binary
        self.overwrite = overwrite

    def build_command(self, manifest: Path, output_path: Path) -> list[str]:
        """Command line for a stream-copy concatenation."""
        return [
            self.binary,
            "-hide_banner",
            "-nostdin",
            "-y" if self.overwrite else "-n",
            "-f",
            "concat",
            "-safe",
            "0",
            "-i",
            str(manifest),
            "-c",
            "copy",
            str(output_path.absolute()),
        ]

    @contextmanager
    def manifest(self, files: list[str], directory: Path) -> Iterator[Path]:
        """Write a temporary manifest for ``files`` and yield its path.

        The manifest lives in ``directory`` so the relative names resolve.
        If that directory is not writable (read-only card, for example) it
        goes to the system temp directory with absolute names instead.
        """
        try:
            handle = tempfile.NamedTemporaryFile(
                mode="w",
                encoding=ConcatDefaults.MANIFEST_ENCODING,
                prefix=ConcatDefaults.MANIFEST_PREFIX,
                suffix=ConcatDefaults.MANIFEST_SUFFIX,
                dir=directory,
                delete=False,
            )
            names = files
        except OSError as e:
            logger.debug("Cannot write manifest in %s (%s), using temp dir", directory, e)
            handle = tempfile.NamedTemporaryFile(
                mode="w",
                encoding=ConcatDefaults.MANIFEST_ENCODING,
                prefix=ConcatDefaults.MANIFEST_PREFIX,
                suffix=ConcatDefaults.MANIFEST_SUFFIX,
                delete=False,
            )
            names = [os.path.abspath(directory / name) for name in files]

        manifest_path = Path(handle.name)
        try:
            with handle:
                handle.write(format_manifest(names))
            logger.debug("Wrote manifest %s with %d records", manifest_path, len(names))
            yield manifest_path
        finally:
            manifest_path.unlink(missing_ok=True)

    def execute_group(self, group: MergeGroup, directory: Path) -> MergeResult:
        """Concatenate ``group`` into its output path.

        Args:
            group: Group to merge; its files are relative to ``directory``
            directory: Source directory

        Returns:
            MergeResult carrying ffmpeg's return code and combined output

        Raises:
            ExternalToolError: If the binary cannot be started
        """
        with self.manifest(group.files, directory) as manifest_path:
            command = self.build_command(manifest_path, group.output_path)
            logger.info("Merging %s (%d parts)", group.key, group.size)
            logger.debug("Running: %s", " ".join(command))
            try:
                completed = subprocess.run(
                    command,
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    text=True,
                    encoding="utf-8",
                    errors="replace",
                    check=False,
                )
            except OSError as e:
                raise create_tool_missing_error(self.binary, e) from e

        if completed.returncode != 0:
            logger.warning(
                "%s exited with status %d for group %s",
                self.binary,
                completed.returncode,
                group.key,
            )
        return MergeResult(
            group=group,
            return_code=completed.returncode,
            output=completed.stdout or "",
        )
