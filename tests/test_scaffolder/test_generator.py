"""Tests for project materialisation.

Covers:
- Folder set and file contents for every built-in template
- Pre-condition failures (invalid name, existing directory, unknown
  template) leave the file system untouched
- Sequential write order and partial trees on failure
- Docker option and console output
"""

from __future__ import annotations

import pytest

from node_backend_gen.errors import (
    AlreadyExistsError,
    InvalidNameError,
    TemplateNotFoundError,
)
from node_backend_gen.scaffolder.generator import (
    ProjectGenerator,
    ProjectOptions,
    create_project,
)
from node_backend_gen.scaffolder.registry import REGISTRY, TemplateRegistry
from node_backend_gen.scaffolder.templates import (
    GeneratedContent,
    TemplateDescriptor,
    literal,
    resolve_content,
)

pytestmark = pytest.mark.unit

ALL_TEMPLATES = REGISTRY.list_keys()


# ---------------------------------------------------------------------------
# ProjectOptions
# ---------------------------------------------------------------------------


class TestProjectOptions:
    def test_defaults(self):
        options = ProjectOptions()
        assert options.include_docker is False
        assert options.quiet is False


# ---------------------------------------------------------------------------
# create_project
# ---------------------------------------------------------------------------


class TestCreateProject:
    def test_returns_root(self, tmp_path, generator, sample_descriptor, quiet):
        root = generator.create_project(tmp_path / "demo", sample_descriptor, "demo", quiet)
        assert root == tmp_path / "demo"
        assert root.is_dir()

    def test_folder_set(self, tmp_path, generator, sample_descriptor, quiet, tree):
        root = generator.create_project(tmp_path / "demo", sample_descriptor, "demo", quiet)
        assert tree.dirs(root) == sample_descriptor.implied_folders()

    def test_file_contents(self, tmp_path, generator, sample_descriptor, quiet, tree):
        root = generator.create_project(tmp_path / "demo", sample_descriptor, "demo", quiet)
        assert tree.files(root) == set(sample_descriptor.files)
        assert (root / "src/index.js").read_text(encoding="utf-8") == "console.log('hi');"
        assert (root / "package.json").read_text(encoding="utf-8") == '{\n    "name": "demo"\n}'
        assert (root / "docs/guide/README.md").read_text(encoding="utf-8") == "# demo\n"

    def test_empty_folder_created(self, tmp_path, generator, sample_descriptor, quiet):
        root = generator.create_project(tmp_path / "demo", sample_descriptor, "demo", quiet)
        assert (root / "src" / "routes").is_dir()
        assert list((root / "src" / "routes").iterdir()) == []

    def test_creates_missing_parents_of_root(self, tmp_path, generator, sample_descriptor, quiet):
        root = generator.create_project(
            tmp_path / "deep" / "parent" / "demo", sample_descriptor, "demo", quiet
        )
        assert (root / "package.json").exists()

    def test_module_level_shortcut(self, tmp_path, sample_descriptor, quiet):
        root = create_project(tmp_path / "demo", sample_descriptor, "demo", quiet)
        assert (root / "src/index.js").exists()

    def test_generated_content_called_once_per_file(self, tmp_path, generator, quiet):
        calls: list[str] = []

        def render(name: str) -> str:
            calls.append(name)
            return name

        descriptor = TemplateDescriptor(
            name="T", files={"a.txt": GeneratedContent(render=render)}
        )
        generator.create_project(tmp_path / "p", descriptor, "p", quiet)
        assert calls == ["p"]

    def test_files_written_in_declaration_order(self, tmp_path, generator, quiet):
        order: list[str] = []

        def recorder(label: str):
            def render(name: str) -> str:
                order.append(label)
                return label
            return GeneratedContent(render=render)

        descriptor = TemplateDescriptor(
            name="T",
            files={"z.txt": recorder("z"), "a.txt": recorder("a"), "m/m.txt": recorder("m")},
        )
        generator.create_project(tmp_path / "p", descriptor, "p", quiet)
        assert order == ["z", "a", "m"]

    def test_progress_output(self, tmp_path, generator, sample_descriptor, capsys):
        generator.create_project(tmp_path / "demo", sample_descriptor, "demo")
        out = capsys.readouterr().out
        assert 'Creating project "demo" with Sample template' in out
        assert "Created folder: src/routes" in out
        assert "Created file: package.json" in out

    def test_quiet_suppresses_output(self, tmp_path, generator, sample_descriptor, quiet, capsys):
        generator.create_project(tmp_path / "demo", sample_descriptor, "demo", quiet)
        assert capsys.readouterr().out == ""


# ---------------------------------------------------------------------------
# Built-in templates
# ---------------------------------------------------------------------------


class TestBuiltInTemplates:
    @pytest.mark.parametrize("key", ALL_TEMPLATES)
    @pytest.mark.parametrize("name", ["demo-app", "API_2", "x"])
    def test_materialised_tree_matches_descriptor(self, tmp_path, generator, quiet, tree, key, name):
        descriptor = REGISTRY.lookup(key)
        root = generator.scaffold(name, key, tmp_path, quiet)

        assert root == tmp_path / name
        assert tree.dirs(root) == descriptor.implied_folders()
        assert tree.files(root) == set(descriptor.files)
        for file_path, source in descriptor.files.items():
            written = (root / file_path).read_bytes().decode("utf-8")
            assert written == resolve_content(source, name), file_path

    def test_basic_scenario(self, tmp_path, generator, quiet):
        root = generator.scaffold("demo-app", "basic", tmp_path, quiet)
        for rel in (
            "src/server.js",
            "src/routes/index.js",
            "src/controllers/userController.js",
            ".env",
            ".gitignore",
            "package.json",
            "README.md",
        ):
            assert (root / rel).is_file(), rel
        assert '"name": "demo-app"' in (root / "package.json").read_text(encoding="utf-8")
        assert (root / "README.md").read_text(encoding="utf-8").startswith("# demo-app")
        assert not (root / "Dockerfile").exists()


# ---------------------------------------------------------------------------
# Pre-condition failures
# ---------------------------------------------------------------------------


class TestPreconditions:
    @pytest.mark.parametrize("name", ["my app", "a/b", "../up", "", "dot.name"])
    def test_invalid_name_mutates_nothing(self, tmp_path, generator, quiet, tree, name):
        before = tree.snapshot(tmp_path)
        with pytest.raises(InvalidNameError):
            generator.scaffold(name, "basic", tmp_path, quiet)
        assert tree.snapshot(tmp_path) == before

    def test_invalid_name_rejected_by_create_project(self, tmp_path, generator, sample_descriptor, quiet):
        with pytest.raises(InvalidNameError):
            generator.create_project(tmp_path / "x", sample_descriptor, "bad name", quiet)
        assert not (tmp_path / "x").exists()

    def test_existing_directory_mutates_nothing(self, tmp_path, generator, quiet, tree):
        generator.scaffold("demo-app", "basic", tmp_path, quiet)
        marker = tmp_path / "demo-app" / "src" / "server.js"
        marker.write_text("// edited", encoding="utf-8")
        before = tree.snapshot(tmp_path)

        with pytest.raises(AlreadyExistsError) as exc_info:
            generator.scaffold("demo-app", "express", tmp_path, quiet)

        assert exc_info.value.path == tmp_path / "demo-app"
        assert tree.snapshot(tmp_path) == before
        assert marker.read_text(encoding="utf-8") == "// edited"

    def test_existing_file_counts_as_existing(self, tmp_path, generator, quiet):
        (tmp_path / "demo").write_text("", encoding="utf-8")
        with pytest.raises(AlreadyExistsError):
            generator.scaffold("demo", "basic", tmp_path, quiet)

    def test_dangling_symlink_counts_as_existing(self, tmp_path, generator, quiet):
        link = tmp_path / "demo"
        try:
            link.symlink_to(tmp_path / "missing-target")
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported")
        with pytest.raises(AlreadyExistsError):
            generator.scaffold("demo", "basic", tmp_path, quiet)

    def test_unknown_template_mutates_nothing(self, tmp_path, generator, quiet, tree):
        before = tree.snapshot(tmp_path)
        with pytest.raises(TemplateNotFoundError):
            generator.scaffold("demo", "nonexistent", tmp_path, quiet)
        assert tree.snapshot(tmp_path) == before
        assert not (tmp_path / "demo").exists()

    def test_target_dir(self, tmp_path, generator):
        assert generator.target_dir("demo", tmp_path) == tmp_path / "demo"


# ---------------------------------------------------------------------------
# Failures mid-way
# ---------------------------------------------------------------------------


class TestPartialFailure:
    def test_render_error_leaves_partial_tree(self, tmp_path, generator, quiet):
        def explode(name: str) -> str:
            raise RuntimeError("render failed")

        descriptor = TemplateDescriptor(
            name="T",
            folders=("src",),
            files={
                "first.txt": literal("1"),
                "second.txt": GeneratedContent(render=explode),
                "third.txt": literal("3"),
            },
        )
        with pytest.raises(RuntimeError, match="render failed"):
            generator.create_project(tmp_path / "p", descriptor, "p", quiet)

        root = tmp_path / "p"
        assert (root / "src").is_dir()
        assert (root / "first.txt").read_text(encoding="utf-8") == "1"
        assert not (root / "second.txt").exists()
        assert not (root / "third.txt").exists()

    def test_os_error_propagates(self, tmp_path, generator, quiet):
        descriptor = TemplateDescriptor(
            name="T",
            files={"blocker": literal("file"), "blocker/inner.txt": literal("x")},
        )
        with pytest.raises(OSError):
            generator.create_project(tmp_path / "p", descriptor, "p", quiet)
        assert (tmp_path / "p" / "blocker").is_file()


# ---------------------------------------------------------------------------
# Docker option
# ---------------------------------------------------------------------------


class TestDockerOption:
    def test_include_docker(self, tmp_path, generator):
        options = ProjectOptions(include_docker=True, quiet=True)
        root = generator.scaffold("demo", "express", tmp_path, options)
        assert (root / "Dockerfile").is_file()
        assert (root / ".dockerignore").is_file()
        assert (root / "docker-compose.yml").is_file()

    def test_custom_registry(self, tmp_path, sample_descriptor, quiet):
        generator = ProjectGenerator(TemplateRegistry({"sample": sample_descriptor}))
        root = generator.scaffold("demo", "sample", tmp_path, quiet)
        assert (root / "src/index.js").exists()
        with pytest.raises(TemplateNotFoundError):
            generator.scaffold("other", "basic", tmp_path, quiet)
