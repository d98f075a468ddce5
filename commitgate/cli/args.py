from __future__ import annotations

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commitgate",
        description="Run the pre-commit checks and block the commit if one fails.",
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Path to config file (default: commitgate.yml/.yaml/.toml/.json, else built-in checks)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log commands and timings to stderr",
    )

    subparsers = parser.add_subparsers(dest="command")

    # run
    subparsers.add_parser("run", help="Run the checks (default)")

    # list
    subparsers.add_parser("list", help="List checks in run order")

    # install
    install = subparsers.add_parser("install", help="Install the git pre-commit hook")
    install.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing pre-commit hook",
    )

    return parser
