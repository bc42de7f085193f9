from __future__ import annotations

import logging
from pathlib import Path

import pytest

from kubeswap.utils.paths import KubePaths, get_paths


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def home(tmp_path: Path) -> Path:
    home_dir = tmp_path / "home"
    (home_dir / ".kube").mkdir(parents=True)
    return home_dir


@pytest.fixture
def paths(home: Path) -> KubePaths:
    return get_paths(home)


@pytest.fixture
def active_config(paths: KubePaths) -> Path:
    paths.kube_config.write_bytes(b"A")
    return paths.kube_config
