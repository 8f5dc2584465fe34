"""Shared utility functions for node-backend-gen.

Provides project-name validation, JSON I/O, file-system helpers and
Rich-based console reporting used by the scaffolder and the CLI.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .errors import InvalidNameError

console = Console()

# ---------------------------------------------------------------------------
# Project name validation
# ---------------------------------------------------------------------------

PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def is_valid_project_name(name: str) -> bool:
    """Return ``True`` if *name* is usable as a project directory name."""
    return bool(name) and PROJECT_NAME_PATTERN.fullmatch(name) is not None


def validate_project_name(name: str) -> str:
    """Validate a project name and return it unchanged.

    The name is used verbatim as a directory name and substituted verbatim
    into generated files, so no normalisation is applied.

    Examples::

        validate_project_name("demo-app")   -> "demo-app"
        validate_project_name("my app")     -> raises InvalidNameError
        validate_project_name("../escape")  -> raises InvalidNameError

    Raises:
        InvalidNameError: If the name is empty or has a character outside
            ``[A-Za-z0-9_-]``.
    """
    if not isinstance(name, str) or not is_valid_project_name(name):
        raise InvalidNameError(str(name))
    return name


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    raw = Path(path).read_text(encoding="utf-8")
    return json.loads(raw)


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> Path:
    """Save data as JSON indented by two spaces.

    Parent directories are created automatically.  No trailing newline is
    appended so the output is byte-stable for a given payload.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2, ensure_ascii=False)
    file_path.write_text(content, encoding="utf-8")
    return file_path


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_text(path: Path, content: str) -> Path:
    """Create parent dirs and write *content* exactly as given."""
    ensure_dir(path.parent)
    # newline="" keeps "\n" as-is on every platform
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)
    return path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(message: str) -> None:
    """Print a dim progress line (one per created folder or file)."""
    console.print(f"[dim]{message}[/dim]", highlight=False)


def print_info(message: str) -> None:
    """Print a blue informational message."""
    console.print(f"[bold blue]{message}[/bold blue]", highlight=False)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]", highlight=False)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_summary_table(
    data: dict[str, str],
    title: str = "Summary",
    columns: tuple[str, str] = ("Item", "Value"),
) -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
        columns: Header labels for the key and value columns.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column(columns[0], style="green", no_wrap=True)
    table.add_column(columns[1])

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_next_steps(project_name: str) -> None:
    """Print the post-creation instructions in a panel."""
    body = "\n".join(
        [
            f"  cd {project_name}",
            "  npm install",
            "  npm run dev",
        ]
    )
    console.print(
        Panel(body, title="[bold blue]Next steps[/bold blue]", expand=False),
        highlight=False,
    )
