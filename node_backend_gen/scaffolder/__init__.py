"""node-backend-gen scaffolder -- materialises Node.js backend templates.

Quick usage::

    from node_backend_gen.scaffolder import ProjectGenerator, ProjectOptions

    generator = ProjectGenerator()
    root = generator.scaffold(
        "demo-app", "express", "/tmp/output",
        ProjectOptions(include_docker=True),
    )
"""

from .docker_gen import DockerGenerator
from .generator import ProjectGenerator, ProjectOptions, create_project
from .registry import REGISTRY, TemplateRegistry
from .templates import (
    GeneratedContent,
    LiteralContent,
    TemplateDescriptor,
    TemplateRenderer,
    resolve_content,
)

__all__ = [
    "DockerGenerator",
    "GeneratedContent",
    "LiteralContent",
    "ProjectGenerator",
    "ProjectOptions",
    "REGISTRY",
    "TemplateDescriptor",
    "TemplateRegistry",
    "TemplateRenderer",
    "create_project",
    "resolve_content",
]
