"""Template descriptors, content sources and Jinja2 rendering.

A template is a ``TemplateDescriptor``: an ordered list of folders plus an
ordered mapping from relative file path to a *content source*.  A content
source is one of two explicit variants:

- ``LiteralContent`` -- fixed text written as-is.
- ``GeneratedContent`` -- a pure function of the project name.  Blueprints
  build these from small Jinja2 snippets through ``TemplateRenderer``.

``resolve_content`` is the single place where the variant is dispatched.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Annotated, Any, Literal, Union

from jinja2 import Environment, StrictUndefined, Template
from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Content sources
# ---------------------------------------------------------------------------


class LiteralContent(BaseModel):
    """File content that does not depend on the project name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["literal"] = "literal"
    text: str


class GeneratedContent(BaseModel):
    """File content produced by ``render(project_name)``.

    ``render`` must be free of side effects; it is called exactly once per
    file at write time.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["generated"] = "generated"
    render: Callable[[str], str]


ContentSource = Annotated[
    Union[LiteralContent, GeneratedContent], Field(discriminator="kind")
]


def resolve_content(source: LiteralContent | GeneratedContent, project_name: str) -> str:
    """Return the text to write for *source*."""
    if isinstance(source, GeneratedContent):
        return source.render(project_name)
    if isinstance(source, LiteralContent):
        return source.text
    raise TypeError(f"Unsupported content source: {type(source).__name__}")


# ---------------------------------------------------------------------------
# Template descriptor
# ---------------------------------------------------------------------------


def check_relative_path(path: str) -> str:
    """Validate a template path and return it unchanged.

    Paths are forward-slash separated, relative, and may not contain empty,
    ``.`` or ``..`` segments, so they always stay inside the project root.
    """
    if not path:
        raise ValueError("template path must not be empty")
    if "\\" in path:
        raise ValueError(f"template path must use forward slashes: {path!r}")
    if path.startswith("/"):
        raise ValueError(f"template path must be relative: {path!r}")
    for segment in path.split("/"):
        if segment in ("", ".", ".."):
            raise ValueError(f"invalid segment {segment!r} in template path {path!r}")
    return path


class TemplateDescriptor(BaseModel):
    """A named bundle of folders and files used to scaffold a project."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Human-readable template name")
    folders: tuple[str, ...] = Field(default=(), description="Folders, in creation order")
    files: Mapping[str, ContentSource] = Field(
        default_factory=dict,
        validate_default=True,
        description="Relative file path -> content source, in write order",
    )

    @field_validator("folders")
    @classmethod
    def _check_folders(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for folder in value:
            check_relative_path(folder)
        return value

    @field_validator("files")
    @classmethod
    def _check_files(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        for file_path in value:
            check_relative_path(file_path)
        return MappingProxyType(dict(value))

    def implied_folders(self) -> set[str]:
        """Every directory the materialised tree contains, relative to its root.

        The declared folders, their ancestors, and the parent directories of
        every file path.
        """
        result: set[str] = set()
        for path in (*self.folders, *(_parent(p) for p in self.files)):
            while path:
                result.add(path)
                path = _parent(path)
        return result


def _parent(path: str) -> str:
    return path.rpartition("/")[0]


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 snippets that reference ``{{ project_name }}``.

    Output is not escaped and trailing newlines are kept, so a snippet
    renders to exactly its own text with the variables substituted.
    Undefined variables raise instead of rendering as empty strings.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def compile(self, template_string: str) -> Callable[[str], str]:
        """Compile *template_string* into a ``project_name -> text`` function."""
        template: Template = self.env.from_string(template_string)

        def render(project_name: str) -> str:
            return template.render(project_name=project_name)

        return render


_default_renderer = TemplateRenderer()


def literal(text: str) -> LiteralContent:
    """Shorthand for a ``LiteralContent`` source."""
    return LiteralContent(text=text)


def generated(template_string: str, renderer: TemplateRenderer | None = None) -> GeneratedContent:
    """Build a ``GeneratedContent`` source from a Jinja2 snippet."""
    return GeneratedContent(render=(renderer or _default_renderer).compile(template_string))
