from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KubeswapError(Exception):
    """Base error for every failure reported to the user."""

    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class SetupError(KubeswapError):
    """Home directory (and therefore every path) cannot be resolved."""


class BackupDirectoryError(KubeswapError):
    """Backup directory cannot be created or read."""


class BackupError(KubeswapError):
    """Current config could not be copied into the backup directory."""


class SwapError(KubeswapError):
    """New config could not be copied over the active one."""
