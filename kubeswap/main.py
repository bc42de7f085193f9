from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from kubeswap import __version__
from kubeswap.errors import KubeswapError
from kubeswap.services.config_service import list_config_backups, swap_config
from kubeswap.utils.app_logging import configure_logging, verbosity_to_level
from kubeswap.utils.config import CONFIG
from kubeswap.utils.paths import KubePaths, get_paths

logger = logging.getLogger(__name__)


def cmd_swap(args: argparse.Namespace, paths: KubePaths) -> int:
    try:
        result = swap_config(args.file, paths)
    except KubeswapError as exc:
        logger.debug("Swap failed", exc_info=True)
        print(f"Error swapping config: {exc}", file=sys.stderr)
        return 1
    print(f"Successfully swapped to new config: {result.new_config}")
    print(f"Old config backed up to: {result.backup_path}")
    return 0


def cmd_list(args: argparse.Namespace, paths: KubePaths) -> int:
    try:
        names = list_config_backups(paths)
    except KubeswapError as exc:
        logger.debug("Listing failed", exc_info=True)
        print(f"Error listing configs: {exc}", file=sys.stderr)
        return 1
    for name in names:
        print(name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=CONFIG.app_name,
        description="kubeswap is a CLI tool to manage and swap between different kubectl config files.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (repeat for debug output)",
    )
    sub = p.add_subparsers(dest="cmd", required=True, metavar="{swap,list}")

    a = sub.add_parser("swap", help="Swap to a new kubectl config file")
    a.add_argument("file", help="Path to the replacement config file")
    a.set_defaults(func=cmd_swap)

    a = sub.add_parser("list", help="List all backed up kubectl config files")
    a.set_defaults(func=cmd_list)
    return p


def main(argv: Sequence[str] | None = None, home: str | None = None) -> int:
    """CLI entry point.

    Args:
        argv: Command-line arguments without the program name.
        home: Home directory override, used by tests.

    Returns:
        int: Exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbosity_to_level(args.verbose))

    try:
        paths = get_paths(home)
    except KubeswapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    logger.debug("Active config: %s, backups: %s", paths.kube_config, paths.backups_dir)

    return args.func(args, paths)


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
