from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from kubeswap.errors import SetupError
from kubeswap.utils.config import CONFIG, AppConfig


@dataclass(frozen=True)
class KubePaths:
    """Strongly-typed container for the paths kubeswap touches."""

    home: Path
    kube_dir: Path
    kube_config: Path
    backups_dir: Path


def get_paths(home: Path | str | None = None, config: AppConfig = CONFIG) -> KubePaths:
    """Return the filesystem paths derived from a home directory.

    Args:
        home: Home directory to use. Defaults to the invoking user's home.
        config: Application configuration providing the directory names.

    Returns:
        KubePaths: Resolved paths.

    Raises:
        SetupError: If the home directory cannot be determined.
    """
    if home is None:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as exc:
            raise SetupError(f"failed to determine user home directory: {exc}") from exc
    home = Path(home)
    kube_dir = home / config.kube_dir_name
    return KubePaths(
        home=home,
        kube_dir=kube_dir,
        kube_config=kube_dir / config.config_name,
        backups_dir=kube_dir / config.backups_dir_name,
    )
