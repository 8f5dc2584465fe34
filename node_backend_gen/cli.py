"""Command-line interface for node-backend-gen.

Usage::

    node-backend-gen create my-api
    node-backend-gen create my-api --template express --yes --docker
    node-backend-gen list-templates
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from . import __version__
from .config import Config
from .errors import ScaffoldError
from .prompts import DefaultPrompter, InteractivePrompter, Prompter, select_options
from .scaffolder.generator import ProjectGenerator, ProjectOptions
from .scaffolder.registry import REGISTRY
from .utils import (
    console,
    print_error,
    print_next_steps,
    print_success,
    print_summary_table,
    print_warning,
)

PROG = "node-backend-gen"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_create(
    args: argparse.Namespace,
    config: Config | None = None,
    prompter: Prompter | None = None,
) -> int:
    """Create a new project from a template.

    Environment defaults are read here, so a bad ``NBG_*`` value only
    affects ``create``.
    """
    if config is None:
        config = Config.from_env()
    project_name = args.project_name
    output_dir = Path(args.output) if args.output else config.output_dir
    generator = ProjectGenerator(REGISTRY)
    # Name and target are checked before any question is asked
    generator.target_dir(project_name, output_dir)

    if prompter is None:
        prompter = DefaultPrompter() if args.yes else InteractivePrompter()

    template_key, include_docker = select_options(
        REGISTRY,
        prompter,
        template=args.template or config.default_template,
        include_docker=args.docker or config.include_docker,
    )

    generator.scaffold(
        project_name,
        template_key,
        output_dir,
        ProjectOptions(include_docker=include_docker, quiet=args.quiet or config.quiet),
    )

    print_success("\nProject created successfully!\n")
    print_next_steps(project_name)
    return 0


def cmd_list_templates(args: argparse.Namespace) -> int:
    """Print every registered template key and its display name."""
    print_summary_table(
        {key: descriptor.name for key, descriptor in REGISTRY.items()},
        title="Available templates",
        columns=("Template", "Description"),
    )
    return 0


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Generate professional Node.js backend folder structures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {PROG} create my-api\n"
            f"  {PROG} create my-api --template express --yes\n"
            f"  {PROG} list-templates\n"
        ),
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"{PROG} {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    create = subparsers.add_parser(
        "create",
        help="Create a new Node.js backend project",
        description="Create a new Node.js backend project",
    )
    create.add_argument("project_name", metavar="project-name", help="Project directory name")
    create.add_argument(
        "-t", "--template",
        default=None,
        help=f"Template to use ({', '.join(REGISTRY.list_keys())})",
    )
    create.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Skip prompts and use defaults",
    )
    create.add_argument(
        "--docker",
        action="store_true",
        help="Include Docker configuration (default answer when prompting)",
    )
    create.add_argument(
        "-o", "--output",
        default=None,
        help="Parent directory for the project (default: current directory)",
    )
    create.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Do not list every created folder and file",
    )
    create.set_defaults(func=cmd_create)

    list_templates = subparsers.add_parser(
        "list-templates",
        help="List available templates",
        description="List available templates",
    )
    list_templates.set_defaults(func=cmd_list_templates)

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``node-backend-gen`` and ``python -m node_backend_gen``."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except ValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        return 1
    except KeyboardInterrupt:
        console.print()
        print_warning("Cancelled by user")
        return 130
    except ScaffoldError as exc:
        print_error(f"Error creating project: {exc}")
        return 1
    except OSError as exc:
        print_error(f"Error creating project: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
