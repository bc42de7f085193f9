from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from kubeswap.errors import BackupError, SwapError
from kubeswap.utils.backup import backup_name, ensure_backup_dir, list_backup_names
from kubeswap.utils.config import CONFIG, AppConfig
from kubeswap.utils.fileio import copy_file
from kubeswap.utils.paths import KubePaths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SwapResult:
    """Outcome of a successful swap."""

    new_config: Path
    backup_path: Path


def swap_config(
    new_config: Path | str,
    paths: KubePaths,
    now: datetime | None = None,
    config: AppConfig = CONFIG,
) -> SwapResult:
    """Back up the active kubeconfig, then replace it with ``new_config``.

    The backup is always written before the active config is touched. If the
    final copy fails the backup stays in place and nothing is rolled back.

    Args:
        new_config: Replacement config file supplied by the user.
        paths: Paths to operate on.
        now: Timestamp for the backup name. Defaults to the current local time.
        config: Application configuration.

    Returns:
        SwapResult: The new config path and the backup actually written.

    Raises:
        BackupDirectoryError: If the backup directory cannot be created.
        BackupError: If the active config cannot be copied to the backup.
        SwapError: If the new config cannot be copied over the active one.
    """
    new_config = Path(new_config)
    ensure_backup_dir(paths.backups_dir, config)

    backup_path = paths.backups_dir / backup_name(now, config)
    if backup_path.exists():
        logger.warning("Backup %s already exists and will be overwritten", backup_path.name)
    try:
        copy_file(paths.kube_config, backup_path)
    except OSError as exc:
        raise BackupError(f"failed to backup current config: {exc}") from exc
    logger.info("Backed up %s to %s", paths.kube_config, backup_path)

    try:
        copy_file(new_config, paths.kube_config)
    except OSError as exc:
        raise SwapError(f"failed to set new config: {exc}") from exc
    logger.info("Copied %s to %s", new_config, paths.kube_config)

    return SwapResult(new_config=new_config, backup_path=backup_path)


def list_config_backups(paths: KubePaths, config: AppConfig = CONFIG) -> list[str]:
    """Return backup names found in the backup directory, in directory order.

    Raises:
        BackupDirectoryError: If the directory is missing or unreadable.
    """
    names = list_backup_names(paths.backups_dir, config)
    logger.info("Found %d backup(s) in %s", len(names), paths.backups_dir)
    return names
