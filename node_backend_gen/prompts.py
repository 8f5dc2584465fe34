"""Input gathering for ``create``: template choice and Docker opt-in.

The scaffolder never prompts by itself.  The CLI picks one ``Prompter``
implementation and hands its answers to the generator:

- ``DefaultPrompter`` answers every question with its default (``--yes``).
- ``InteractivePrompter`` asks on the terminal through Rich prompts and
  refuses to run without one.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .errors import PromptUnavailableError
from .scaffolder.registry import TemplateRegistry
from .utils import console as default_console


class Prompter(Protocol):
    """Capability to answer the ``create`` questions."""

    def select(self, message: str, choices: list[tuple[str, str]], default: str) -> str:
        """Return one key from *choices* (``(key, label)`` pairs)."""
        ...

    def confirm(self, message: str, default: bool = False) -> bool:
        """Return a yes/no answer."""
        ...


class DefaultPrompter:
    """Non-interactive prompter: every answer is the default."""

    def select(self, message: str, choices: list[tuple[str, str]], default: str) -> str:
        return default

    def confirm(self, message: str, default: bool = False) -> bool:
        return default


class InteractivePrompter:
    """Terminal prompter backed by ``rich.prompt``.

    Raises ``PromptUnavailableError`` when *stream* is not a terminal.
    """

    def __init__(self, console: Console | None = None, stream: TextIO | None = None) -> None:
        self.console = console or default_console
        self.stream = stream if stream is not None else sys.stdin

    def select(self, message: str, choices: list[tuple[str, str]], default: str) -> str:
        self._require_terminal()
        for key, label in choices:
            self.console.print(f"  [green]{key}[/green] - {label}", highlight=False)
        keys = [key for key, _ in choices]
        return Prompt.ask(
            message,
            choices=keys,
            default=default if default in keys else keys[0],
            console=self.console,
            stream=self.stream,
        )

    def confirm(self, message: str, default: bool = False) -> bool:
        self._require_terminal()
        return Confirm.ask(message, default=default, console=self.console, stream=self.stream)

    def _require_terminal(self) -> None:
        isatty = getattr(self.stream, "isatty", None)
        if isatty is None or not isatty():
            raise PromptUnavailableError()


def select_options(
    registry: TemplateRegistry,
    prompter: Prompter,
    template: str | None = None,
    include_docker: bool = False,
) -> tuple[str, bool]:
    """Ask for the template and Docker opt-in.

    Args:
        registry: Templates offered as choices.
        prompter: Where the answers come from.
        template: Explicitly requested key; becomes the default choice.
        include_docker: Default answer for the Docker question.

    Returns:
        ``(template_key, include_docker)``.  The key is not checked against
        the registry here; the generator reports unknown keys.
    """
    choices = [(key, f"{descriptor.name} ({key})") for key, descriptor in registry.items()]
    template_key = prompter.select(
        "Choose a template",
        choices,
        default=template or registry.default_key,
    )
    docker = prompter.confirm("Include Docker configuration?", default=include_docker)
    return template_key, docker
