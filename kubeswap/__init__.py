from __future__ import annotations

__version__ = "0.1.0"

from .errors import (
    BackupDirectoryError,
    BackupError,
    KubeswapError,
    SetupError,
    SwapError,
)
from .services.config_service import SwapResult, list_config_backups, swap_config
from .utils.paths import KubePaths, get_paths

__all__ = [
    "__version__",
    "KubeswapError",
    "SetupError",
    "BackupDirectoryError",
    "BackupError",
    "SwapError",
    "KubePaths",
    "get_paths",
    "SwapResult",
    "swap_config",
    "list_config_backups",
]
