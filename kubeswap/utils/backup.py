from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path

from kubeswap.errors import BackupDirectoryError
from kubeswap.utils.config import CONFIG, AppConfig

logger = logging.getLogger(__name__)


def backup_name(now: datetime | None = None, config: AppConfig = CONFIG) -> str:
    """Build a backup file name such as ``config_backup_20250101_120000``.

    Second precision only: two backups in the same second share a name.
    """
    now = now or datetime.now()
    return f"{config.backup_prefix}{now.strftime(config.timestamp_format)}"


def ensure_backup_dir(backups_dir: Path, config: AppConfig = CONFIG) -> Path:
    """Create the backup directory (and missing parents) if absent.

    Raises:
        BackupDirectoryError: If the directory cannot be created, e.g. a
            regular file already occupies the path.
    """
    try:
        backups_dir.mkdir(mode=config.backup_dir_mode, parents=True, exist_ok=True)
    except OSError as exc:
        raise BackupDirectoryError(f"failed to create backup directory: {exc}") from exc
    logger.debug("Backup directory ready: %s", backups_dir)
    return backups_dir


def list_backup_names(backups_dir: Path, config: AppConfig = CONFIG) -> list[str]:
    """Return backup file names in directory enumeration order.

    Entries that are not regular files or lack the backup prefix are skipped.
    The order is whatever the filesystem yields; it is not sorted.

    Raises:
        BackupDirectoryError: If the directory cannot be opened or read.
    """
    names: list[str] = []
    try:
        with os.scandir(backups_dir) as entries:
            for entry in entries:
                if not entry.name.startswith(config.backup_prefix):
                    continue
                if not entry.is_file():
                    logger.debug("Skipping non-file entry: %s", entry.name)
                    continue
                names.append(entry.name)
    except OSError as exc:
        raise BackupDirectoryError(f"failed to read backup directory: {exc}") from exc
    return names
