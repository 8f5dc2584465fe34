"""node-backend-gen configuration.

Typed defaults for the CLI.  Settings use a Pydantic v2 model so they are
validated at construction time and can be serialised to/from JSON or read
from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Global node-backend-gen configuration.

    Created once by the CLI entry point; command-line flags override the
    values loaded here.
    """

    default_template: str = Field(
        default="basic", description="Template key used when none is given"
    )
    include_docker: bool = Field(
        default=False, description="Add Docker files in non-interactive mode"
    )
    output_dir: Path = Field(
        default_factory=Path.cwd,
        description="Parent directory in which the project folder is created",
    )
    quiet: bool = Field(default=False, description="Suppress per-file progress lines")

    @field_validator("default_template")
    @classmethod
    def _strip_template(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("default_template must not be empty")
        return value

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            NBG_DEFAULT_TEMPLATE, NBG_INCLUDE_DOCKER, NBG_OUTPUT_DIR, NBG_QUIET.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("NBG_DEFAULT_TEMPLATE"):
            kwargs["default_template"] = os.environ["NBG_DEFAULT_TEMPLATE"]
        if os.environ.get("NBG_INCLUDE_DOCKER"):
            kwargs["include_docker"] = os.environ["NBG_INCLUDE_DOCKER"].strip().lower() in _TRUTHY
        if os.environ.get("NBG_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["NBG_OUTPUT_DIR"])
        if os.environ.get("NBG_QUIET"):
            kwargs["quiet"] = os.environ["NBG_QUIET"].strip().lower() in _TRUTHY
        return cls(**kwargs)
