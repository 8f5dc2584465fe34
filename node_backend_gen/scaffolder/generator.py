"""Project materialisation.

Takes a ``TemplateDescriptor`` and writes it to disk under a fresh project
root: the root itself, every declared folder, then every declared file with
its content resolved against the project name.  Work is strictly
sequential and is never rolled back: a failure part-way through leaves the
partially written tree in place.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from ..errors import AlreadyExistsError
from ..utils import ensure_dir, print_info, print_step, validate_project_name, write_text
from .docker_gen import DockerGenerator
from .registry import REGISTRY, TemplateRegistry
from .templates import TemplateDescriptor, resolve_content


# ---------------------------------------------------------------------------
# Options model
# ---------------------------------------------------------------------------


class ProjectOptions(BaseModel):
    """Per-run switches for ``ProjectGenerator.create_project``."""

    include_docker: bool = Field(default=False, description="Run the Docker step")
    quiet: bool = Field(default=False, description="Suppress per-file progress lines")


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Scaffolds Node.js backend projects from registered templates."""

    def __init__(self, registry: TemplateRegistry | None = None) -> None:
        self.registry = registry or REGISTRY

    # -- Public API --------------------------------------------------------

    def scaffold(
        self,
        project_name: str,
        template_key: str,
        output_dir: str | Path,
        options: ProjectOptions | None = None,
    ) -> Path:
        """Validate inputs, look up the template, and create the project.

        Every check runs before the file system is touched.

        Args:
            project_name: Name of the project directory to create.
            template_key: Registry key of the template to use.
            output_dir: Parent directory of the new project.
            options: Run options (Docker step, verbosity).

        Returns:
            Path to the generated project root.

        Raises:
            InvalidNameError: The name has disallowed characters.
            AlreadyExistsError: ``output_dir / project_name`` exists.
            TemplateNotFoundError: ``template_key`` is not registered.
        """
        root_dir = self.target_dir(project_name, output_dir)
        descriptor = self.registry.lookup(template_key)
        return self.create_project(root_dir, descriptor, project_name, options)

    def target_dir(self, project_name: str, output_dir: str | Path) -> Path:
        """Return ``output_dir / project_name`` after checking it can be created.

        Raises:
            InvalidNameError: The name has disallowed characters.
            AlreadyExistsError: The directory already exists.
        """
        validate_project_name(project_name)
        root_dir = Path(output_dir) / project_name
        _ensure_absent(root_dir)
        return root_dir

    def create_project(
        self,
        root_dir: str | Path,
        descriptor: TemplateDescriptor,
        project_name: str,
        options: ProjectOptions | None = None,
    ) -> Path:
        """Materialise *descriptor* at *root_dir*.

        Raises:
            InvalidNameError: The name has disallowed characters.
            AlreadyExistsError: *root_dir* already exists.
            ManifestError: The Docker step could not update ``package.json``.
            OSError: Any directory or file could not be created.
        """
        options = options or ProjectOptions()
        validate_project_name(project_name)
        root = Path(root_dir)
        _ensure_absent(root)

        if not options.quiet:
            print_info(
                f'\nCreating project "{project_name}" with {descriptor.name} template...\n'
            )

        # 1. Project root
        root.mkdir(parents=True)

        # 2. Declared folders, in order
        self._create_folders(root, descriptor.folders, options.quiet)

        # 3. Declared files, in mapping order
        self._create_files(root, descriptor, project_name, options.quiet)

        # 4. Optional Docker step
        if options.include_docker:
            DockerGenerator(quiet=options.quiet).apply(root, project_name)

        return root

    # -- Steps -------------------------------------------------------------

    @staticmethod
    def _create_folders(root: Path, folders: tuple[str, ...], quiet: bool) -> None:
        for folder in folders:
            ensure_dir(root / folder)
            if not quiet:
                print_step(f"Created folder: {folder}")

    @staticmethod
    def _create_files(
        root: Path, descriptor: TemplateDescriptor, project_name: str, quiet: bool
    ) -> None:
        for file_path, source in descriptor.files.items():
            write_text(root / file_path, resolve_content(source, project_name))
            if not quiet:
                print_step(f"Created file: {file_path}")


def create_project(
    root_dir: str | Path,
    descriptor: TemplateDescriptor,
    project_name: str,
    options: ProjectOptions | None = None,
) -> Path:
    """Module-level shortcut for ``ProjectGenerator().create_project``."""
    return ProjectGenerator().create_project(root_dir, descriptor, project_name, options)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _ensure_absent(path: Path) -> None:
    # is_symlink() covers dangling links, which exists() reports as absent
    if path.exists() or path.is_symlink():
        raise AlreadyExistsError(path)
