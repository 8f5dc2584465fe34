"""Docker configuration for a freshly generated project.

Adds ``Dockerfile``, ``.dockerignore`` and ``docker-compose.yml`` to the
project root and merges ``docker:*`` scripts into ``package.json``.  The
three files are identical for every template.
"""

from __future__ import annotations

import json
from pathlib import Path

from ..errors import ManifestInvalidError, ManifestUnreadableError
from ..utils import load_json, print_step, save_json, write_text
from .templates import LiteralContent, literal, resolve_content

MANIFEST_NAME = "package.json"

DOCKERFILE = literal(
    """\
FROM node:18-alpine

WORKDIR /app

COPY package*.json ./
RUN npm ci --only=production

COPY . .

EXPOSE 3000

CMD ["npm", "start"]"""
)

DOCKERIGNORE = literal(
    """\
node_modules
npm-debug.log
.git
.gitignore
README.md
.env
.env.*
coverage
.nyc_output"""
)

DOCKER_COMPOSE = literal(
    """\
version: '3'
services:
  app:
    build: .
    ports:
      - "3000:3000"
    environment:
      - NODE_ENV=production
    restart: unless-stopped"""
)


def docker_scripts(project_name: str) -> dict[str, str]:
    """Return the ``docker:*`` manifest scripts for *project_name*."""
    return {
        "docker:build": f"docker build -t {project_name} .",
        "docker:run": f"docker run -p 3000:3000 {project_name}",
        "docker:up": "docker-compose up",
        "docker:down": "docker-compose down",
    }


class DockerGenerator:
    """Applies the Docker step to an already materialised project."""

    # Output file name -> (label, content)
    _FILES: dict[str, tuple[str, LiteralContent]] = {
        "Dockerfile": ("dockerfile", DOCKERFILE),
        ".dockerignore": ("dockerignore", DOCKERIGNORE),
        "docker-compose.yml": ("compose", DOCKER_COMPOSE),
    }

    def __init__(self, quiet: bool = False) -> None:
        self.quiet = quiet

    def apply(self, root_dir: Path, project_name: str) -> dict[str, Path]:
        """Update the manifest and write the three Docker files.

        The manifest is read and validated before anything is written, so a
        bad ``package.json`` leaves the project without Docker files.

        Returns:
            Mapping of label to written path: ``manifest``, ``dockerfile``,
            ``dockerignore`` and ``compose``.

        Raises:
            ManifestUnreadableError: ``package.json`` is missing or unreadable.
            ManifestInvalidError: ``package.json`` is not a JSON object, or
                its ``scripts`` entry is not an object.
        """
        manifest_path = root_dir / MANIFEST_NAME
        manifest = self._read_manifest(manifest_path)

        scripts = manifest.get("scripts", {})
        if not isinstance(scripts, dict):
            raise ManifestInvalidError(manifest_path, '"scripts" is not an object')
        manifest["scripts"] = {**scripts, **docker_scripts(project_name)}

        result: dict[str, Path] = {"manifest": save_json(manifest, manifest_path)}
        for file_name, (label, source) in self._FILES.items():
            result[label] = write_text(root_dir / file_name, resolve_content(source, project_name))

        if not self.quiet:
            print_step("Added Docker configuration")
        return result

    @staticmethod
    def _read_manifest(path: Path) -> dict:
        try:
            data = load_json(path)
        except json.JSONDecodeError as exc:
            raise ManifestInvalidError(path, f"invalid JSON ({exc.msg})") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestUnreadableError(path, str(exc)) from exc
        if not isinstance(data, dict):
            raise ManifestInvalidError(path, "top-level value is not an object")
        return data
