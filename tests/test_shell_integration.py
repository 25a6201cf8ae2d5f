"""Tests for the bundled shell functions"""

import os
import shutil
import stat
import subprocess
from pathlib import Path

import pytest

import gwt

SHELL_DIR = Path(gwt.__file__).parent / "shell_integration"

pytestmark = pytest.mark.skipif(shutil.which("bash") is None, reason="bash not installed")


@pytest.fixture
def fake_gwt(temp_dir):
    """A stand-in gwt executable that prints $GWT_TARGET on stdout."""
    bin_dir = temp_dir / "bin"
    bin_dir.mkdir()
    script = bin_dir / "gwt"
    script.write_text('#!/bin/sh\necho "progress for $1" >&2\necho "$GWT_TARGET"\n')
    script.chmod(script.stat().st_mode | stat.S_IEXEC)
    return bin_dir


def run_bash(command, fake_gwt, target, cwd):
    env = dict(os.environ)
    env["PATH"] = f"{fake_gwt}{os.pathsep}{env.get('PATH', '')}"
    env["GWT_TARGET"] = str(target)
    # No controlling terminal and no tty on any stream, as under cron or CI
    return subprocess.run(
        ["bash", "-c", f'source "{SHELL_DIR / "bash.sh"}"; {command}; echo "cwd=$PWD"'],
        cwd=cwd,
        env=env,
        stdin=subprocess.DEVNULL,
        capture_output=True,
        text=True,
        start_new_session=True,
        check=False,
    )


@pytest.mark.parametrize("command", ["gwt switch feature/x", "gwt list", "gwt feature/x"])
def test_changes_directory_without_a_terminal(command, fake_gwt, temp_dir):
    target = temp_dir / "project-feature-x"
    target.mkdir()

    result = run_bash(command, fake_gwt, target, temp_dir)

    assert result.returncode == 0, result.stderr
    assert f"Switched to: {target}" in result.stdout
    assert f"cwd={target}" in result.stdout


def test_non_path_output_is_passed_through(fake_gwt, temp_dir):
    result = run_bash("gwt switch feature/x", fake_gwt, "not a directory", temp_dir)

    assert "not a directory" in result.stdout
    assert f"cwd={temp_dir}" in result.stdout


def test_status_commands_are_not_captured(fake_gwt, temp_dir):
    target = temp_dir / "elsewhere"
    target.mkdir()

    result = run_bash("gwt prune", fake_gwt, target, temp_dir)

    assert "Switched to" not in result.stdout
    assert f"cwd={temp_dir}" in result.stdout


@pytest.mark.parametrize("name", ["bash.sh", "zsh.sh", "fish.fish"])
def test_list_output_is_captured_in_every_shell(name):
    bypass_line = next(
        line for line in (SHELL_DIR / name).read_text().splitlines()
        if "delete" in line and "prune" in line
    )
    assert "list" not in bypass_line
