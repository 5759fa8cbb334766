"""
shopify_theme_setup.cli - Command Line Interface
================================================

This module provides the command-line entry point using Typer.

The tool has a single job, so the application has a single command:
running ``shopify-theme-setup`` inside a theme directory sets it up.

Usage Examples
--------------
Set up the current directory:
    $ shopify-theme-setup

Set up another directory:
    $ shopify-theme-setup --dir ../my-theme

Use different executables or versions from a TOML file:
    $ shopify-theme-setup --config setup.toml

Exit Codes
----------
0  setup finished
1  any failure (Node.js too old, a command failed, a file could not be
   copied, lint-staged missing after install, unexpected error)

See Also
--------
- bootstrap.py: The setup pipeline
- models.py: Configuration model
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from shopify_theme_setup import __version__, output
from shopify_theme_setup.bootstrap import run_setup
from shopify_theme_setup.errors import SetupError
from shopify_theme_setup.models import SetupConfig


# =============================================================================
# CLI Application Setup
# =============================================================================

app = typer.Typer(
    name="shopify-theme-setup",
    help="Set up Prettier, Husky, lint-staged and VS Code settings for a Shopify theme.",
    rich_markup_mode="rich",
    add_completion=False,
)


# =============================================================================
# Version Callback
# =============================================================================

def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        output.console.print(
            f"[bold green]shopify-theme-setup[/] version [cyan]{__version__}[/]"
        )
        raise typer.Exit()


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(target_dir: Path | None, config_file: Path | None) -> SetupConfig:
    """
    Build the run configuration from command-line options.

    Raises
    ------
    typer.Exit
        With code 1 if the configuration is invalid or the configuration
        file can't be read or parsed.
    """
    try:
        if config_file is not None:
            return SetupConfig.from_toml(config_file, target_dir=target_dir)
        if target_dir is not None:
            return SetupConfig(target_dir=target_dir)
        return SetupConfig()
    except ValidationError as e:
        output.error("❌ Invalid configuration")
        for err in e.errors():
            location = ".".join(str(part) for part in err["loc"])
            output.detail(f"{location}: {err['msg']}" if location else err["msg"])
        raise typer.Exit(1)
    except (OSError, ValueError) as e:
        # ValueError covers TOML syntax errors and undecodable bytes
        output.error(f"❌ Could not read configuration file {config_file}")
        output.detail(str(e))
        raise typer.Exit(1)


# =============================================================================
# Setup Command
# =============================================================================

@app.command()
def setup(
    target_dir: Annotated[
        Path | None,
        typer.Option(
            "--dir",
            "-C",
            help="Theme directory to set up (default: current directory)",
            file_okay=False,
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="TOML file with setup settings",
            dir_okay=False,
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    Set up a Shopify theme development environment.

    Creates package.json and a git repository if needed, installs
    [cyan]prettier[/], [cyan]husky[/] and [cyan]lint-staged[/], copies
    configuration files and installs a pre-commit hook.

    Existing configuration files are only replaced if you agree when asked.
    """
    output.info(f"🚀 Shopify Theme Setup v{__version__}")
    output.info("Setting up your Shopify theme development environment...\n")

    config = load_config(target_dir, config_file)

    try:
        run_setup(config)
    except SetupError as e:
        output.error(f"❌ {e.message}")
        if e.detail:
            output.detail(e.detail)
        raise typer.Exit(1)
    except Exception as e:
        output.error("❌ An error occurred during setup:")
        output.error(str(e))
        raise typer.Exit(1)
