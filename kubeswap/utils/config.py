from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppConfig:
    """Immutable application configuration."""

    app_name: str = "kubeswap"

    kube_dir_name: str = ".kube"
    config_name: str = "config"
    backups_dir_name: str = "kubeswap_backups"

    # Backup
    backup_prefix: str = "config_backup_"
    timestamp_format: str = "%Y%m%d_%H%M%S"
    backup_dir_mode: int = 0o700


CONFIG = AppConfig()
