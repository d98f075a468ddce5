from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

HOOK_NAME = "pre-commit"
HOOK_MARKER = "# installed by commitgate"


class HookInstallError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


def hook_script(python: str | None = None) -> str:
    exe = python or sys.executable
    return f'#!/bin/sh\n{HOOK_MARKER}\nexec "{exe}" -m commitgate run\n'


def hooks_dir(start: str | Path | None = None) -> Path:
    """Return the hooks directory git uses for the repository containing ``start``.

    Honours ``core.hooksPath`` and worktrees, since git resolves the path itself.
    """
    base = Path(start) if start is not None else Path.cwd()
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--git-path", "hooks"],
            cwd=base,
            capture_output=True,
            text=True,
        )
    except OSError as exc:
        raise HookInstallError(f"Could not run git: {exc}") from exc

    if completed.returncode != 0:
        raise HookInstallError(f"Not a git repository: {base.resolve()}")

    return (base / completed.stdout.strip()).resolve()


def install_hook(
    start: str | Path | None = None, *, force: bool = False, python: str | None = None
) -> Path:
    target_dir = hooks_dir(start)
    target = target_dir / HOOK_NAME

    try:
        if target.exists() and not force:
            existing = target.read_text(encoding="utf-8", errors="replace")
            if HOOK_MARKER not in existing:
                raise HookInstallError(
                    f"{target} already exists; use --force to overwrite it"
                )

        target_dir.mkdir(parents=True, exist_ok=True)
        target.write_text(hook_script(python), encoding="utf-8")
        target.chmod(0o755)
    except OSError as exc:
        raise HookInstallError(f"Cannot write {target}: {exc}") from exc

    logger.debug("wrote %s", target)
    return target
