"""Exceptions raised by setup stages.

Every expected failure is a ``SetupError``. The CLI turns it into a red
message, an optional grey detail line, and exit status 1.
"""

from __future__ import annotations


class SetupError(Exception):
    """Base class for failures that abort a setup run."""

    def __init__(self, message: str, detail: str | None = None) -> None:
        self.message = message
        self.detail = detail
        super().__init__(message)


class EnvironmentUnsupportedError(SetupError):
    """Raised when Node.js is missing or older than the supported minimum."""


class ExternalCommandError(SetupError):
    """Raised when a shelled-out command exits non-zero or cannot start."""

    def __init__(
        self, message: str, args: list[str], detail: str | None = None
    ) -> None:
        self.command = list(args)
        super().__init__(message, detail)


class FileSystemError(SetupError):
    """Raised when reading or writing files in the target directory fails."""


class TemplateCopyError(FileSystemError):
    """Raised when a bundled template cannot be copied into place."""


class VerificationError(SetupError):
    """Raised when a post-install check fails even though the install succeeded."""
