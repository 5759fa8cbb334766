"""
shopify_theme_setup.bootstrap - Setup Pipeline
==============================================

This module contains the stages of a setup run and the function that
runs them in order.

Architecture
------------
The run is a strict pipeline; each stage starts only after the previous
one finished:

    1. Preflight           - Node.js is present and new enough
    2. Manifest init       - package.json exists, placeholder test script removed
    3. Repository init     - git repository exists
    4. Conflict resolve    - ask once whether to overwrite existing config files
    5. Dependency install  - npm install --save-dev prettier husky lint-staged
    6. Template copy       - copy config files from the bundled templates
    7. Hook install        - npx husky-init, then replace .husky/pre-commit
    8. Lint-staged verify  - reinstall lint-staged and check node_modules

Any failure raises a ``SetupError`` and ends the run. Files written by
earlier stages are left in place: a second run re-checks everything from
the filesystem and picks up where it makes sense.

Usage Example
-------------
>>> from shopify_theme_setup.bootstrap import run_setup
>>> from shopify_theme_setup.models import SetupConfig
>>> result = run_setup(SetupConfig(target_dir="my-theme"))
>>> result.files_written
['.prettierrc.json', '.gitignore', ...]
"""

from __future__ import annotations

import re
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from shopify_theme_setup import output
from shopify_theme_setup.errors import (
    EnvironmentUnsupportedError,
    TemplateCopyError,
    VerificationError,
)
from shopify_theme_setup.manifest import ensure_manifest
from shopify_theme_setup.models import (
    CONFIG_FILES,
    PRE_COMMIT_HOOK,
    ConfigFile,
    SetupConfig,
    Stage,
)
from shopify_theme_setup.prompts import Confirm, console_confirm
from shopify_theme_setup.runner import CommandRunner, SubprocessRunner, run_checked
from shopify_theme_setup.templates import template_path


OVERWRITE_QUESTION = "Do you want to overwrite these files?"

HOOK_MODE = 0o755

_NODE_VERSION_RE = re.compile(r"v?(\d+)\.")


# =============================================================================
# Result Data Classes
# =============================================================================


@dataclass
class SetupResult:
    """
    Record of what a successful run did.

    Attributes
    ----------
    target_dir : Path
        Directory that was set up.

    stages_completed : list[Stage]
        Stages in the order they finished.

    manifest_created : bool
        Whether ``npm init`` had to create package.json.

    repository_created : bool
        Whether ``git init`` had to run.

    files_written : list[str]
        Config files copied from templates (target-relative).

    files_skipped : list[str]
        Existing config files left untouched after a "no" answer.
    """

    target_dir: Path
    stages_completed: list[Stage] = field(default_factory=list)
    manifest_created: bool = False
    repository_created: bool = False
    files_written: list[str] = field(default_factory=list)
    files_skipped: list[str] = field(default_factory=list)


# =============================================================================
# Stage 1: Preflight
# =============================================================================


def parse_node_major(version_output: str) -> int | None:
    """
    Extract the major version from ``node --version`` output.

    Examples
    --------
    >>> parse_node_major("v18.17.0")
    18
    >>> parse_node_major("garbage") is None
    True
    """
    match = _NODE_VERSION_RE.search(version_output.strip())
    if match is None:
        return None
    return int(match.group(1))


def check_node_version(config: SetupConfig, runner: CommandRunner) -> int:
    """
    Make sure Node.js is installed and at least ``min_node_version``.

    Returns
    -------
    int
        The detected major version.

    Raises
    ------
    EnvironmentUnsupportedError
        If node is missing, its version can't be read, or it is too old.
    """
    message = f"Node.js version {config.min_node_version} or higher is required."
    result = runner.run(
        [config.node_command, "--version"], config.target_dir, capture=True
    )
    if not result.ok:
        raise EnvironmentUnsupportedError(message, result.stdout.strip() or None)

    major = parse_node_major(result.stdout)
    if major is None:
        raise EnvironmentUnsupportedError(
            message, f"Could not read Node.js version from {result.stdout.strip()!r}"
        )
    if major < config.min_node_version:
        raise EnvironmentUnsupportedError(
            message, f"Found Node.js {result.stdout.strip()}"
        )
    return major


# =============================================================================
# Stage 3: Repository
# =============================================================================


def ensure_git_repository(config: SetupConfig, runner: CommandRunner) -> bool:
    """
    Run ``git init`` unless ``.git`` already exists.

    Returns
    -------
    bool
        True if a repository was initialized.
    """
    if (config.target_dir / ".git").exists():
        return False

    output.info("🔧 Initializing Git repository...")
    run_checked(
        runner,
        [config.git_command, "init"],
        config.target_dir,
        "Failed to initialize Git repository",
    )
    return True


# =============================================================================
# Stage 4: Conflicts
# =============================================================================


def find_existing(
    files: tuple[ConfigFile, ...] | list[ConfigFile], target_dir: Path
) -> list[ConfigFile]:
    """Config files whose target already exists in ``target_dir``."""
    return [f for f in files if f.target_path(target_dir).exists()]


def resolve_conflicts(
    files: tuple[ConfigFile, ...] | list[ConfigFile],
    target_dir: Path,
    confirm: Confirm,
) -> tuple[list[ConfigFile], list[ConfigFile]]:
    """
    Decide which config files to copy.

    If none of the targets exist, all files are copied and nobody is
    asked. Otherwise the existing files are listed and the user answers
    once for all of them.

    Returns
    -------
    tuple[list[ConfigFile], list[ConfigFile]]
        ``(to_copy, skipped)``.
    """
    files = list(files)
    existing = find_existing(files, target_dir)
    if not existing:
        return files, []

    output.warning("⚠️  The following configuration files already exist:")
    for f in existing:
        output.warning(f"   - {f.target}")

    if confirm(OVERWRITE_QUESTION):
        return files, []

    output.info("\nSkipping existing files. Setup will continue with remaining configurations.")
    return [f for f in files if f not in existing], existing


# =============================================================================
# Stage 5: Dependencies
# =============================================================================


def install_dependencies(config: SetupConfig, runner: CommandRunner) -> None:
    """Install the development dependencies in one ``npm install`` call."""
    output.info("\n📚 Installing dependencies...")
    run_checked(
        runner,
        [config.npm_command, "install", "--save-dev", *config.dev_dependencies],
        config.target_dir,
        "Failed to install dependencies",
    )


# =============================================================================
# Stage 6: Templates
# =============================================================================


def copy_template(entry: ConfigFile, target_dir: Path) -> Path:
    """Byte-copy one template to its target, replacing whatever is there."""
    target = entry.target_path(target_dir)
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(template_path(entry.template), target)
    return target


def copy_config_files(files: list[ConfigFile], target_dir: Path) -> list[str]:
    """
    Copy the given config files from the bundled templates.

    Returns
    -------
    list[str]
        Targets written, in order.

    Raises
    ------
    TemplateCopyError
        On the first file that can't be copied. Files copied before it
        stay in place.
    """
    output.info("📄 Creating configuration files...")
    written: list[str] = []
    try:
        (target_dir / ".vscode").mkdir(parents=True, exist_ok=True)
        for entry in files:
            copy_template(entry, target_dir)
            written.append(entry.target)
            output.success(f"✓ Created {entry.target}")
    except OSError as e:
        raise TemplateCopyError("Failed to copy configuration files", str(e)) from e
    return written


# =============================================================================
# Stage 7: Husky
# =============================================================================


def install_pre_commit_hook(config: SetupConfig, runner: CommandRunner) -> Path:
    """
    Scaffold Husky and replace its pre-commit hook with ours.

    Only the existence of ``.husky/`` is relied upon; whatever
    ``husky-init`` wrote into the hook is discarded.
    """
    output.info("\n🐶 Setting up Husky for pre-commit hooks...")
    run_checked(
        runner,
        [config.npx_command, "husky-init"],
        config.target_dir,
        "Failed to initialize Husky",
    )

    try:
        hook = copy_template(PRE_COMMIT_HOOK, config.target_dir)
        hook.chmod(HOOK_MODE)
    except OSError as e:
        raise TemplateCopyError("Failed to install pre-commit hook", str(e)) from e
    return hook


# =============================================================================
# Stage 8: lint-staged
# =============================================================================


def verify_lint_staged(config: SetupConfig, runner: CommandRunner) -> None:
    """
    Reinstall lint-staged and check that it landed in node_modules.

    Raises
    ------
    ExternalCommandError
        If the install command fails.
    VerificationError
        If the command succeeded but the package directory is missing.
    """
    output.info("🔍 Configuring lint-staged...")
    run_checked(
        runner,
        [config.npm_command, "install", "--save-dev", "lint-staged"],
        config.target_dir,
        "Failed to install lint-staged",
    )

    if not (config.target_dir / "node_modules" / "lint-staged").is_dir():
        raise VerificationError("lint-staged installation failed")


# =============================================================================
# Main Pipeline
# =============================================================================


def run_setup(
    config: SetupConfig,
    runner: CommandRunner | None = None,
    confirm: Confirm | None = None,
) -> SetupResult:
    """
    Set up a Shopify theme directory.

    Parameters
    ----------
    config : SetupConfig
        Target directory and tool settings.

    runner : CommandRunner, optional
        Executes external commands. Defaults to ``SubprocessRunner``.

    confirm : Confirm, optional
        Answers the overwrite question. Defaults to ``console_confirm``.

    Returns
    -------
    SetupResult
        What the run did.

    Raises
    ------
    SetupError
        From the first stage that fails; later stages do not run.
    """
    runner = runner or SubprocessRunner()
    confirm = confirm or console_confirm
    target_dir = config.target_dir
    result = SetupResult(target_dir=target_dir)

    check_node_version(config, runner)
    result.stages_completed.append(Stage.PREFLIGHT)

    result.manifest_created = ensure_manifest(config, runner)
    result.stages_completed.append(Stage.MANIFEST_INIT)

    result.repository_created = ensure_git_repository(config, runner)
    result.stages_completed.append(Stage.REPO_INIT)

    to_copy, skipped = resolve_conflicts(CONFIG_FILES, target_dir, confirm)
    result.files_skipped = [f.target for f in skipped]
    result.stages_completed.append(Stage.CONFLICT_RESOLVE)

    install_dependencies(config, runner)
    result.stages_completed.append(Stage.DEPENDENCY_INSTALL)

    result.files_written = copy_config_files(to_copy, target_dir)
    result.stages_completed.append(Stage.TEMPLATE_COPY)

    install_pre_commit_hook(config, runner)
    result.stages_completed.append(Stage.HOOK_INSTALL)

    verify_lint_staged(config, runner)
    result.stages_completed.append(Stage.LINT_STAGED_VERIFY)

    output.success("\n✅ Setup complete! Your Shopify theme development environment is ready.")
    output.info("\nNext steps:")
    output.detail("1. Start developing your theme")
    output.detail("2. Your code will be automatically formatted on commit")
    output.detail("3. VS Code will use the recommended settings and extensions\n")

    return result
