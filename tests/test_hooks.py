from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from commitgate.hooks.installer import (
    HOOK_MARKER,
    HookInstallError,
    hook_script,
    hooks_dir,
    install_hook,
)

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    subprocess.run(["git", "init", "-q", str(tmp_path)], check=True)
    return tmp_path


def test_hook_script_execs_the_gate() -> None:
    script = hook_script("/opt/py/bin/python")
    lines = script.splitlines()

    assert lines[0] == "#!/bin/sh"
    assert HOOK_MARKER in lines
    assert lines[-1] == 'exec "/opt/py/bin/python" -m commitgate run'


@requires_git
def test_hooks_dir_points_into_git_dir(repo: Path) -> None:
    assert hooks_dir(repo) == (repo / ".git" / "hooks").resolve()


@requires_git
def test_hooks_dir_outside_repo_raises(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path.parent))
    with pytest.raises(HookInstallError):
        hooks_dir(tmp_path)


@requires_git
def test_install_writes_executable_hook(repo: Path) -> None:
    path = install_hook(repo, python="python3")

    assert path == (repo / ".git" / "hooks" / "pre-commit").resolve()
    assert path.read_text(encoding="utf-8") == hook_script("python3")
    assert os.access(path, os.X_OK)


@requires_git
def test_install_is_repeatable(repo: Path) -> None:
    first = install_hook(repo)
    second = install_hook(repo)
    assert first == second


@requires_git
def test_install_refuses_foreign_hook(repo: Path) -> None:
    foreign = repo / ".git" / "hooks" / "pre-commit"
    foreign.parent.mkdir(parents=True, exist_ok=True)
    foreign.write_text("#!/bin/sh\nmake lint\n", encoding="utf-8")

    with pytest.raises(HookInstallError):
        install_hook(repo)
    assert "make lint" in foreign.read_text(encoding="utf-8")

    install_hook(repo, force=True)
    assert HOOK_MARKER in foreign.read_text(encoding="utf-8")


@requires_git
@pytest.mark.parametrize("force", [False, True])
def test_directory_in_place_of_hook_raises(repo: Path, force: bool) -> None:
    (repo / ".git" / "hooks" / "pre-commit").mkdir(parents=True)

    with pytest.raises(HookInstallError):
        install_hook(repo, force=force)
