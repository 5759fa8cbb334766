"""
shopify_theme_setup.manifest - package.json Handling
====================================================

Makes sure the target directory has a ``package.json`` and removes the
placeholder ``test`` script that ``npm init -y`` generates. Themes have no
test runner, and the placeholder script exits with an error.

The manifest is read and rewritten in full. Key order is kept as found,
indentation is two spaces and the file ends with a newline, matching what
npm itself writes.

Read and parse errors are not wrapped: they propagate to the top-level
handler, which reports the underlying message.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from shopify_theme_setup import output
from shopify_theme_setup.models import SetupConfig
from shopify_theme_setup.runner import CommandRunner, run_checked


MANIFEST_NAME = "package.json"


def manifest_path(target_dir: Path) -> Path:
    return target_dir / MANIFEST_NAME


def read_manifest(path: Path) -> dict[str, Any]:
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def write_manifest(path: Path, data: dict[str, Any]) -> None:
    path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )


def remove_test_script(data: dict[str, Any]) -> bool:
    """
    Delete ``scripts.test`` from a manifest in place.

    Returns
    -------
    bool
        True if a test script was removed.
    """
    scripts = data.get("scripts")
    if isinstance(scripts, dict) and "test" in scripts:
        del scripts["test"]
        return True
    return False


def strip_test_script(target_dir: Path) -> bool:
    """Remove ``scripts.test`` from the manifest on disk and rewrite it."""
    path = manifest_path(target_dir)
    data = read_manifest(path)
    removed = remove_test_script(data)
    write_manifest(path, data)
    return removed


def ensure_manifest(config: SetupConfig, runner: CommandRunner) -> bool:
    """
    Create ``package.json`` with ``npm init -y`` if it is missing, then
    strip its test script.

    Returns
    -------
    bool
        True if the manifest was created by this call.

    Raises
    ------
    ExternalCommandError
        If ``npm init`` fails.
    """
    created = False
    if not manifest_path(config.target_dir).exists():
        output.info("📦 Creating package.json...")
        run_checked(
            runner,
            [config.npm_command, "init", "-y"],
            config.target_dir,
            "Failed to create package.json",
        )
        created = True

    strip_test_script(config.target_dir)
    return created
