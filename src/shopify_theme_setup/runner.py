"""
shopify_theme_setup.runner - External Command Execution
=======================================================

All shell-outs go through a ``CommandRunner``. Stages only know about
argument lists and a working directory, which lets tests swap in a fake
runner and assert the exact commands without a real npm or git.

The real implementation inherits the parent's stdin/stdout/stderr so the
output of npm, git and husky shows up directly in the terminal. Only the
Node.js version probe captures output.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from shopify_theme_setup.errors import ExternalCommandError


@dataclass
class CommandResult:
    """
    Outcome of one command invocation.

    Attributes
    ----------
    args : list[str]
        The command as requested (before PATH resolution).

    returncode : int
        Exit status. Non-zero also covers "could not start".

    stdout : str
        Captured output, or the OS error message when the command could
        not be started. Empty when output was inherited.
    """

    args: list[str]
    returncode: int
    stdout: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandRunner(Protocol):
    """Narrow interface for running an external command."""

    def run(
        self, args: list[str], cwd: Path, *, capture: bool = False
    ) -> CommandResult: ...


def resolve_argv(args: list[str]) -> list[str]:
    """
    Resolve ``args[0]`` through PATH.

    On Windows ``npm`` and ``npx`` are ``.cmd`` shims that
    ``subprocess.run`` cannot execute directly, so they are routed
    through ``cmd.exe /c``.
    """
    cmd = args[0]
    if any(sep and sep in cmd for sep in ("/", "\\", os.path.sep, os.path.altsep)):
        return args

    resolved = shutil.which(cmd)
    if resolved is None:
        return args

    if os.name == "nt" and Path(resolved).suffix.lower() in {".cmd", ".bat"}:
        comspec = os.environ.get("ComSpec", "cmd.exe")
        return [comspec, "/d", "/c", resolved, *args[1:]]

    return [resolved, *args[1:]]


class SubprocessRunner:
    """Run commands with ``subprocess.run``, blocking until they finish."""

    def run(
        self, args: list[str], cwd: Path, *, capture: bool = False
    ) -> CommandResult:
        try:
            completed = subprocess.run(
                resolve_argv(args),
                cwd=str(cwd),
                check=False,
                capture_output=capture,
                text=True,
            )
        except FileNotFoundError:
            return CommandResult(args, 127, f"Command not found: {args[0]}")
        except OSError as e:
            return CommandResult(args, 126, f"Failed to execute {args[0]}: {e}")

        output = completed.stdout if capture else ""
        return CommandResult(args, completed.returncode, output or "")


def describe_failure(result: CommandResult) -> str:
    """Diagnostic line for a failed command, mirroring what a shell would report."""
    text = f"Command failed: {' '.join(result.args)}"
    if result.returncode not in (0, 126, 127):
        text += f" (exit code {result.returncode})"
    if result.stdout.strip():
        text += f"\n{result.stdout.strip()}"
    return text


def run_checked(
    runner: CommandRunner, args: list[str], cwd: Path, error_message: str
) -> CommandResult:
    """
    Run a command and raise if it did not succeed.

    Raises
    ------
    ExternalCommandError
        With ``error_message`` as the headline and the command's own
        diagnostic as detail.
    """
    result = runner.run(args, cwd)
    if not result.ok:
        raise ExternalCommandError(error_message, args, describe_failure(result))
    return result
