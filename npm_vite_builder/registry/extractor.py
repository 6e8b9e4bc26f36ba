"""
Archive extractor for npm tarballs.

Streams a gzip-compressed tar through ``tarfile`` and writes entries to disk
in archive order.
"""

import io
import shutil
import tarfile

from ..errors import ArchiveError
from ..utils.log import get_logger
from ..utils.paths import ensure_dir, ensure_parent_dir, safe_join

logger = get_logger("extractor")


def extract_tarball(data: bytes, dest_dir: str) -> int:
    """
    Extract a ``.tgz`` archive into ``dest_dir``.

    Directories are created, regular files are streamed to newly created
    files. Symlinks, hard links and device entries are skipped.

    Args:
        data: gzip-compressed tar bytes
        dest_dir: Destination directory (empty or not yet existing)

    Returns:
        Number of files written

    Raises:
        ArchiveError: If an entry points outside ``dest_dir``
        tarfile.TarError: If the archive is corrupt
    """
    ensure_dir(dest_dir)
    files_written = 0

    # "r|gz" reads sequentially: no seeking back into the archive
    with tarfile.open(fileobj=io.BytesIO(data), mode="r|gz") as archive:
        for member in archive:
            try:
                out_path = safe_join(dest_dir, member.name)
            except ValueError as e:
                raise ArchiveError(str(e)) from e

            if member.isdir():
                ensure_dir(out_path)
            elif member.isfile():
                source = archive.extractfile(member)
                ensure_parent_dir(out_path)
                with open(out_path, 'wb') as f:
                    shutil.copyfileobj(source, f)
                files_written += 1
            else:
                logger.debug(f"Skipping {member.name} (unsupported entry type)")

    logger.debug(f"Extracted {files_written} files to {dest_dir}")
    return files_written
