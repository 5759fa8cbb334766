"""
shopify_theme_setup.templates - Bundled Configuration Files
===========================================================

This package contains the static files copied into the target theme
directory. They are copied byte-for-byte; nothing here is rendered or
parsed.

Template Naming Convention
--------------------------
- Template names drop the leading dot of their target
- Files that live in a dot-directory drop the dot from the directory too
- The mapping itself lives in ``models.CONFIG_FILES``

Available Templates
-------------------
Formatting:
    - prettierrc.json → .prettierrc.json
    - lintstagedrc → .lintstagedrc

Ignore Files:
    - gitignore → .gitignore
    - shopifyignore → .shopifyignore

Editor:
    - vscode/extensions.json → .vscode/extensions.json
    - vscode/settings.json → .vscode/settings.json

Hooks:
    - husky/pre-commit → .husky/pre-commit (always overwritten, made executable)

Usage
-----
>>> from shopify_theme_setup.templates import template_path
>>> template_path("vscode/settings.json").name
'settings.json'
"""

from __future__ import annotations

from pathlib import Path


TEMPLATES_DIR = Path(__file__).parent


def template_path(name: str) -> Path:
    """Return the absolute path of a bundled template."""
    return TEMPLATES_DIR / name
