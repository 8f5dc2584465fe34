"""Exception hierarchy for node-backend-gen.

Every failure the CLI reports derives from ``ScaffoldError`` so the entry
point can print a single red line and exit non-zero.  Filesystem failures
are not wrapped; they surface as ``OSError``.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding errors."""


class InvalidNameError(ScaffoldError):
    """Raised when a project name contains characters outside ``[A-Za-z0-9_-]``."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid project name {name!r}. "
            "Use only letters, numbers, hyphens, and underscores."
        )


class AlreadyExistsError(ScaffoldError):
    """Raised when the target project directory is already present."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f'Directory "{path.name}" already exists.')


class TemplateNotFoundError(ScaffoldError):
    """Raised when a template key is not in the registry."""

    def __init__(self, key: str, available: list[str] | None = None) -> None:
        self.key = key
        self.available = list(available or [])
        message = f'Template "{key}" not found.'
        if self.available:
            message += f" Available: {', '.join(self.available)}"
        super().__init__(message)


class ManifestError(ScaffoldError):
    """Base class for ``package.json`` failures during the Docker step."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ManifestUnreadableError(ManifestError):
    """Raised when ``package.json`` is missing or cannot be read."""


class ManifestInvalidError(ManifestError):
    """Raised when ``package.json`` is not a JSON object with object ``scripts``."""


class PromptUnavailableError(ScaffoldError):
    """Raised when interactive prompting is requested without a terminal."""

    def __init__(self) -> None:
        super().__init__(
            "Interactive prompts need a terminal. Re-run with --yes to use defaults."
        )
