"""File discovery, backups and whole-file text I/O for .sm charts."""

import logging
import os
import shutil
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

CHART_EXTENSION = ".sm"
BACKUP_EXTENSION = ".bak"


def get_all_files(directory: Union[str, Path]) -> List[Path]:
    """
    Recursively list every file under `directory`.

    Subdirectories that cannot be read are skipped with a warning.
    """
    def _warn(error: OSError):
        logger.warning(f"⚠️  Warning: Could not read directory {error.filename}: {error.strerror}")

    files = []
    for root, dirs, names in os.walk(directory, onerror=_warn):
        for name in names:
            files.append(Path(root) / name)
    return files


def find_chart_files(directory: Union[str, Path], extension: str = CHART_EXTENSION) -> List[Path]:
    """All files under `directory` with the chart extension (any case), sorted."""
    extension = extension.lower()
    charts = [path for path in get_all_files(directory) if path.suffix.lower() == extension]
    charts.sort()
    return charts


def backup_path_for(file_path: Union[str, Path]) -> Path:
    """'Song.mp3.sm' -> 'Song.mp3.bak'"""
    return Path(file_path).with_suffix(BACKUP_EXTENSION)


def create_backup(file_path: Union[str, Path]) -> Optional[Path]:
    """
    Copy a chart to its .bak sibling.

    An existing backup is never overwritten, so it always holds the file as
    it was before the first run.

    Returns:
        Path of the new backup, or None if one already existed

    Raises:
        OSError: If the copy fails
    """
    path = Path(file_path)
    backup = backup_path_for(path)

    if backup.exists():
        logger.info(f"Backup already exists for: {path.name}")
        return None

    shutil.copy2(path, backup)
    logger.info(f"✓ Created backup: {path.name} → {backup.name}")
    return backup


def read_chart(file_path: Union[str, Path]) -> str:
    # newline='' keeps '\r\n' intact so unchanged lines are written back byte-exact
    with open(file_path, 'r', encoding='utf-8', newline='') as f:
        return f.read()


def write_chart(file_path: Union[str, Path], content: str) -> None:
    with open(file_path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)
