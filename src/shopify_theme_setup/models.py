"""
shopify_theme_setup.models - Configuration Models
=================================================

This module defines the data models used during a setup run. Pydantic
gives us validation of user-supplied configuration (from the command line
or a TOML file) with clear error messages.

Architecture Notes
------------------
    SetupConfig (main)
    ├── target_dir: Path
    ├── min_node_version: int
    ├── node/npm/npx/git commands: str
    └── dev_dependencies: list[str]

    ConfigFile (one per copied file)
    ├── target: str     (relative to the target directory)
    └── template: str   (relative to the bundled templates)

    Stage (enum of pipeline steps, in execution order)

Usage Example
-------------
>>> from shopify_theme_setup.models import CONFIG_FILES, SetupConfig
>>> config = SetupConfig(target_dir=".")
>>> [f.target for f in CONFIG_FILES][:2]
['.prettierrc.json', '.gitignore']
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Enumerations
# =============================================================================

class Stage(str, Enum):
    """
    Steps of a setup run, in the order they execute.

    Every stage can fail, and a failure ends the run; there is no
    compensation step for stages that already completed.
    """

    PREFLIGHT = "preflight"
    MANIFEST_INIT = "manifest-init"
    REPO_INIT = "repo-init"
    CONFLICT_RESOLVE = "conflict-resolve"
    DEPENDENCY_INSTALL = "dependency-install"
    TEMPLATE_COPY = "template-copy"
    HOOK_INSTALL = "hook-install"
    LINT_STAGED_VERIFY = "lint-staged-verify"


# =============================================================================
# Configuration File Table
# =============================================================================

class ConfigFile(BaseModel):
    """
    A configuration file copied from the bundled templates.

    Attributes
    ----------
    target : str
        POSIX path relative to the target directory, e.g. ``.vscode/settings.json``.

    template : str
        POSIX path relative to the templates package, e.g. ``vscode/settings.json``.
    """

    model_config = ConfigDict(frozen=True)

    target: str
    template: str

    def target_path(self, target_dir: Path) -> Path:
        """Absolute location of this file inside ``target_dir``."""
        return target_dir.joinpath(*self.target.split("/"))


CONFIG_FILES: tuple[ConfigFile, ...] = (
    ConfigFile(target=".prettierrc.json", template="prettierrc.json"),
    ConfigFile(target=".gitignore", template="gitignore"),
    ConfigFile(target=".shopifyignore", template="shopifyignore"),
    ConfigFile(target=".vscode/extensions.json", template="vscode/extensions.json"),
    ConfigFile(target=".vscode/settings.json", template="vscode/settings.json"),
    ConfigFile(target=".lintstagedrc", template="lintstagedrc"),
)

PRE_COMMIT_HOOK = ConfigFile(target=".husky/pre-commit", template="husky/pre-commit")


# =============================================================================
# Main Configuration Model
# =============================================================================

class SetupConfig(BaseModel):
    """
    Settings for a single setup run.

    The target directory is passed explicitly to every stage rather
    than relying on the process working directory, so runs against
    different directories never interfere with each other.

    Attributes
    ----------
    target_dir : Path
        Theme directory to set up. Must already exist.

    min_node_version : int
        Lowest supported Node.js major version.

    node_command, npm_command, npx_command, git_command : str
        Executables used for the external steps.

    dev_dependencies : list[str]
        Packages installed with ``npm install --save-dev``.

    Examples
    --------
    >>> config = SetupConfig(target_dir="/tmp")
    >>> config.dev_dependencies
    ['prettier', 'husky', 'lint-staged']
    """

    model_config = ConfigDict(extra="forbid")

    target_dir: Path = Field(
        default_factory=Path.cwd,
        validate_default=True,
        description="Directory to set up",
    )
    min_node_version: int = Field(
        default=14,
        ge=1,
        description="Minimum supported Node.js major version",
    )
    node_command: str = Field(default="node", min_length=1)
    npm_command: str = Field(default="npm", min_length=1)
    npx_command: str = Field(default="npx", min_length=1)
    git_command: str = Field(default="git", min_length=1)
    dev_dependencies: list[str] = Field(
        default_factory=lambda: ["prettier", "husky", "lint-staged"],
        min_length=1,
        description="Development dependencies to install",
    )

    @field_validator("target_dir")
    @classmethod
    def validate_target_dir(cls, v: Path) -> Path:
        """
        Resolve the target directory and make sure it exists.

        Raises
        ------
        ValueError
            If the path does not point at a directory.
        """
        v = Path(v).expanduser().resolve()
        if not v.is_dir():
            msg = f"Target directory does not exist: {v}"
            raise ValueError(msg)
        return v

    @classmethod
    def from_toml(cls, path: Path, **overrides: object) -> SetupConfig:
        """
        Load configuration from a TOML file.

        Settings may sit at the top level or under a
        ``[tool.shopify-theme-setup]`` table, so the same keys can live in
        a dedicated file or in an existing ``pyproject.toml``. A relative
        ``target_dir`` is taken relative to the file's directory. Unknown
        keys are rejected.

        Parameters
        ----------
        path : Path
            Path to the TOML file.

        **overrides
            Values that take precedence over the file (e.g. ``target_dir``
            from the command line).

        Raises
        ------
        FileNotFoundError
            If the file doesn't exist.
        ValidationError
            If the file has invalid values.
        """
        import tomli

        with open(path, "rb") as f:
            data = tomli.load(f)

        data = data.get("tool", {}).get("shopify-theme-setup", data)

        # A relative target_dir in the file is relative to the file itself
        target_dir = data.get("target_dir")
        if isinstance(target_dir, str):
            data["target_dir"] = Path(path).parent / Path(target_dir).expanduser()

        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)
