"""
shopify_theme_setup - Shopify Theme Tooling Bootstrapper
========================================================

A CLI tool that gives a Shopify theme directory a standard front-end
tooling baseline in one run.

Features
--------
- **package.json**: Created with ``npm init -y`` if missing, placeholder test script removed
- **Git**: Repository initialized if missing
- **Formatting**: Prettier + lint-staged configuration, run on every commit via Husky
- **Editor Support**: VS Code settings and extension recommendations
- **Safe Re-runs**: Existing configuration files are only replaced after asking

Quick Start
-----------
```bash
pip install shopify-theme-setup
cd my-theme
shopify-theme-setup
```

Example
-------
>>> from shopify_theme_setup import SetupConfig, run_setup
>>> run_setup(SetupConfig(target_dir="my-theme"))

Architecture
------------
- ``cli``: Typer command line interface
- ``bootstrap``: The setup pipeline and its stages
- ``manifest``: package.json handling
- ``runner``: External command execution
- ``prompts``: Overwrite confirmation
- ``output``: Rich console output
- ``models``: Pydantic configuration and the config file table
- ``errors``: Exceptions that abort a run
- ``templates``: Files copied into the theme

License
-------
MIT License
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "1.0.0"
__license__ = "MIT"

# =============================================================================
# Public API Exports
# =============================================================================

from shopify_theme_setup.bootstrap import SetupResult, run_setup
from shopify_theme_setup.errors import SetupError
from shopify_theme_setup.models import CONFIG_FILES, ConfigFile, SetupConfig, Stage


__all__ = [
    "CONFIG_FILES",
    "ConfigFile",
    "SetupConfig",
    "SetupError",
    "SetupResult",
    "Stage",
    "__version__",
    "run_setup",
]
