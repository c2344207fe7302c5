"""Interactive prompts.

``Prompter`` defines the three question shapes the pipeline asks;
``ConsolePrompter`` implements them with ``rich.prompt``.  Ctrl-C or end of
input at any prompt raises ``UserCancelled``.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from create_discobase.errors import UserCancelled
from create_discobase.models import Edition, LocationMode
from create_discobase.utils import console, print_error

Validator = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class Choice:
    """One option of a single-choice prompt."""

    value: str
    label: str
    hint: str = ""


EDITION_CHOICES: tuple[Choice, ...] = (
    Choice(
        Edition.CORE_TEMPLATE.value,
        "Core Edition (Recommended)",
        "Clean, package-based, easy updates & optimized",
    ),
    Choice(
        Edition.FULL_SOURCE.value,
        "Source Edition (Advanced)",
        "Full source code, maximum control & customization",
    ),
)

LOCATION_CHOICES: tuple[Choice, ...] = (
    Choice(LocationMode.NEW_FOLDER.value, "Create in a new folder"),
    Choice(LocationMode.CURRENT_DIRECTORY.value, "Use current directory"),
)


class Prompter:
    """Question interface consumed by ``SetupPipeline``."""

    def select_one(self, message: str, choices: Sequence[Choice]) -> str:
        raise NotImplementedError

    def confirm_yes_no(self, message: str, default: bool = True) -> bool:
        raise NotImplementedError

    def text_input(
        self, message: str, placeholder: str = "", validate: Validator | None = None
    ) -> str:
        raise NotImplementedError


class ConsolePrompter(Prompter):
    """Terminal prompts rendered with Rich."""

    def __init__(self, out: Console | None = None) -> None:
        self.console = out or console

    def select_one(self, message: str, choices: Sequence[Choice]) -> str:
        self.console.print(f"[bold]{escape(message)}[/bold]")
        for i, choice in enumerate(choices, start=1):
            hint = f" [dim]({escape(choice.hint)})[/dim]" if choice.hint else ""
            self.console.print(f"  [cyan]{i}.[/cyan] {escape(choice.label)}{hint}")
        with _cancellable():
            picked = Prompt.ask(
                "Select",
                console=self.console,
                choices=[str(i) for i in range(1, len(choices) + 1)],
                default="1",
            )
        return choices[int(picked) - 1].value

    def confirm_yes_no(self, message: str, default: bool = True) -> bool:
        with _cancellable():
            return Confirm.ask(escape(message), console=self.console, default=default)

    def text_input(
        self, message: str, placeholder: str = "", validate: Validator | None = None
    ) -> str:
        label = escape(message)
        if placeholder:
            label = f"{label} [dim]({escape(placeholder)})[/dim]"
        while True:
            with _cancellable():
                value = Prompt.ask(label, console=self.console, default="", show_default=False)
            value = value.strip()
            problem = validate(value) if validate else None
            if problem is None:
                return value
            print_error(problem, self.console)


@contextmanager
def _cancellable() -> Iterator[None]:
    """Turn Ctrl-C / EOF inside a prompt into ``UserCancelled``."""
    try:
        yield
    except (KeyboardInterrupt, EOFError) as exc:
        raise UserCancelled() from exc
