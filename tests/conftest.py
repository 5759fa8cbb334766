"""
pytest configuration and shared fixtures for shopify-theme-setup tests.

Fixtures defined here are automatically available to all tests.

Fixtures
--------
theme_dir : Path
    An empty temporary theme directory.

config : SetupConfig
    A configuration pointing at ``theme_dir``.

existing_config_files : dict[str, bytes]
    All six configuration files pre-filled with sentinel content.

Tests build a ``FakeRunner`` directly when they need one; it records
invocations and imitates npm, git and husky without running them.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from shopify_theme_setup.models import CONFIG_FILES, SetupConfig
from shopify_theme_setup.runner import CommandResult


NPM_INIT = ["npm", "init", "-y"]
GIT_INIT = ["git", "init"]
NPM_INSTALL_ALL = ["npm", "install", "--save-dev", "prettier", "husky", "lint-staged"]
HUSKY_INIT = ["npx", "husky-init"]
NPM_INSTALL_LINT_STAGED = ["npm", "install", "--save-dev", "lint-staged"]
NODE_VERSION = ["node", "--version"]

SCAFFOLDED_HOOK = '#!/usr/bin/env sh\n. "$(dirname -- "$0")/_/husky.sh"\n\nnpm test\n'


class FakeRunner:
    """
    Stand-in for ``SubprocessRunner``.

    Successful commands leave behind what the real tools would: a
    package.json with a placeholder test script, a ``.git`` directory,
    a scaffolded ``.husky/pre-commit`` and package directories under
    ``node_modules``.

    Parameters
    ----------
    node_version : str
        What ``node --version`` prints.

    fail : list[list[str]]
        Commands that exit with status 1.

    missing_packages : set[str]
        Packages that ``npm install`` reports as installed but never
        writes to disk.
    """

    def __init__(
        self,
        node_version: str = "v18.17.0",
        fail: list[list[str]] | None = None,
        missing_packages: set[str] | None = None,
    ) -> None:
        self.node_version = node_version
        self.fail = [list(args) for args in fail or []]
        self.missing_packages = missing_packages or set()
        self.calls: list[list[str]] = []

    def run(
        self, args: list[str], cwd: Path, *, capture: bool = False
    ) -> CommandResult:
        args = list(args)
        self.calls.append(args)

        if args in self.fail:
            return CommandResult(args, 1, "simulated failure")

        if args == NODE_VERSION:
            return CommandResult(args, 0, f"{self.node_version}\n")

        if args == NPM_INIT:
            manifest = {
                "name": cwd.name,
                "version": "1.0.0",
                "description": "",
                "main": "index.js",
                "scripts": {"test": 'echo "Error: no test specified" && exit 1'},
                "keywords": [],
                "author": "",
                "license": "ISC",
            }
            (cwd / "package.json").write_text(json.dumps(manifest, indent=2))
        elif args == GIT_INIT:
            (cwd / ".git").mkdir()
        elif args == HUSKY_INIT:
            (cwd / ".husky").mkdir(exist_ok=True)
            (cwd / ".husky" / "pre-commit").write_text(SCAFFOLDED_HOOK)
        elif args[:3] == ["npm", "install", "--save-dev"]:
            for package in args[3:]:
                if package not in self.missing_packages:
                    (cwd / "node_modules" / package).mkdir(parents=True, exist_ok=True)

        return CommandResult(args, 0, "")


@pytest.fixture
def theme_dir(tmp_path: Path) -> Path:
    """Create an empty theme directory."""
    path = (tmp_path / "my-theme").resolve()
    path.mkdir()
    return path


@pytest.fixture
def config(theme_dir: Path) -> SetupConfig:
    return SetupConfig(target_dir=theme_dir)


@pytest.fixture
def existing_config_files(theme_dir: Path) -> dict[str, bytes]:
    """
    Put all six configuration files in place with sentinel content.

    Returns
    -------
    dict[str, bytes]
        Target path -> the sentinel bytes written there.
    """
    written: dict[str, bytes] = {}
    for entry in CONFIG_FILES:
        target = entry.target_path(theme_dir)
        target.parent.mkdir(parents=True, exist_ok=True)
        content = f"sentinel for {entry.target}\n".encode()
        target.write_bytes(content)
        written[entry.target] = content
    return written
