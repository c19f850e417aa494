"""Source file collection.

Walks an asset directory and reads every regular file into memory, keyed by
its ``/``-separated path relative to the directory root.
"""

import logging
import os
from pathlib import Path
from typing import Dict, Union

from walletkit.primitives.errors import NoSourceFiles

logger = logging.getLogger(__name__)

EXCLUDED_FILENAMES = frozenset({".DS_Store", ".gitkeep"})

SourceFileSet = Dict[str, bytes]


def ensure_source_directory(directory: Union[str, Path]) -> Path:
    """Return ``directory`` as a Path, raising NoSourceFiles unless it is a directory."""
    path = Path(directory)
    if not path.is_dir():
        raise NoSourceFiles(str(directory))
    return path


def collect_source_files(directory: Union[str, Path]) -> SourceFileSet:
    """Read every non-excluded file below ``directory``.

    Args:
        directory: Root of the asset tree.

    Returns:
        Mapping of relative path (``/``-separated) to file contents.

    Raises:
        NoSourceFiles: If ``directory`` is missing or not a directory.
    """
    root = ensure_source_directory(directory)

    files: SourceFileSet = {}
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for filename in sorted(filenames):
            if filename in EXCLUDED_FILENAMES:
                continue
            file_path = Path(dirpath) / filename
            if not file_path.is_file():
                continue
            relative = file_path.relative_to(root).as_posix()
            files[relative] = file_path.read_bytes()

    logger.debug(f"Collected {len(files)} source files from {root}")
    return files
