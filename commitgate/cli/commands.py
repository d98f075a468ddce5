from __future__ import annotations

import argparse
import logging
import sys

from commitgate.config import CheckConfig, ConfigError, resolve_gate
from commitgate.gate import CheckResult, GateListener, GateResult, GateRunner
from commitgate.hooks import HookInstallError, install_hook

from .args import build_parser


class BannerListener(GateListener):
    def check_started(self, check: CheckConfig) -> None:
        print(f"### Running {check.id} ###", flush=True)

    def check_finished(self, check: CheckConfig, result: CheckResult) -> None:
        if result.ok:
            print(f"### {check.id} passed ###", flush=True)
        else:
            print(f"### {check.id} failed, aborting commit ###", flush=True)


def run_cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        _setup_logging(args.verbose)

        match args.command:
            case None | "run":
                return cmd_run(args)
            case "list":
                return cmd_list(args)
            case "install":
                return cmd_install(args)
            case _:
                return 2

    except (ConfigError, HookInstallError) as exc:
        print(str(exc), file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        return 130


def main() -> None:
    sys.exit(run_cli())


def cmd_run(args: argparse.Namespace) -> int:
    gate = resolve_gate(args.config)
    result = GateRunner(gate, BannerListener()).run()
    _print_result(result)
    return result.exit_code


def cmd_list(args: argparse.Namespace) -> int:
    gate = resolve_gate(args.config)
    for cid in gate.check_ids():
        print(cid)
    return 0


def cmd_install(args: argparse.Namespace) -> int:
    path = install_hook(force=args.force)
    print(f"Installed pre-commit hook: {path}")
    return 0


def _print_result(result: GateResult) -> None:
    if result.accepted:
        print("### All checks passed ###")
        return

    for cid in result.skipped:
        print(f"### {cid} skipped ###")
    print(f"### Commit rejected: {', '.join(result.failed)} failed ###")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    logging.getLogger("commitgate").setLevel(
        logging.DEBUG if verbose else logging.WARNING
    )
