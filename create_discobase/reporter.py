"""User-facing progress and summary output.

Stages receive a ``Reporter`` and never print on their own.  The base
``Reporter`` is silent; ``ConsoleReporter`` renders with Rich.
"""

from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text

from create_discobase.models import Answers, Edition, LocationMode
from create_discobase.utils import console, print_error, print_success, print_warning

DOCS_URL = "https://www.discobase.site"
DISCORD_URL = "https://discord.gg/ethical-programmer-s-1188398653530984539"
GITHUB_URL = "https://github.com/ethical-programmer/create-discobase"

FEATURE_OVERVIEW = (
    ("Core Capabilities", (
        "Support for Discord.js v14",
        "Slash & Prefix command system",
        "Hot reload for commands, events & functions",
    )),
    ("Built-in Tools", (
        "Admin dashboard with real-time insights",
        "MongoDB integration with Mongoose",
    )),
    ("Production Ready", (
        "Smart error handling & structured logging",
        "Event system, activity tracking & automation ready",
    )),
)


def build_next_steps(answers: Answers, project_name: str) -> list[str]:
    """Numbered follow-up instructions shown after a successful run."""
    steps: list[str] = []
    if answers.location_mode is LocationMode.NEW_FOLDER:
        steps.append(f"cd {project_name}")
    steps.append("Edit config.json with your bot token and bot ID")
    if answers.install_database_support:
        steps.append("Add your MongoDB URL in config.json")
    if answers.edition is Edition.CORE_TEMPLATE:
        steps.append("npm start")
    return steps


def build_manual_install_steps(
    project_name: str, install_command: str, created_folder: bool
) -> list[str]:
    """Commands the user runs when the automatic install failed."""
    steps = [f"cd {project_name}"] if created_folder else []
    steps.append(install_command)
    return steps


class Reporter:
    """Silent base reporter; every hook is a no-op."""

    def intro(self) -> None:
        pass

    def progress(self, message: str) -> AbstractContextManager:
        return nullcontext()

    def success(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def manual_install(self, steps: list[str]) -> None:
        pass

    def summary(self, next_steps: list[str]) -> None:
        pass

    def cancelled(self) -> None:
        pass


class ConsoleReporter(Reporter):
    """Renders progress with Rich spinners, panels and coloured messages."""

    def __init__(self, out: Console | None = None) -> None:
        self.console = out or console

    def intro(self) -> None:
        self.console.print()
        self.console.print(Rule("[bold #FF416C] D I S C O B A S E [/bold #FF416C]", style="#FF4B2B"))
        self.console.print(
            "[bold magenta]Welcome to DiscoBase[/bold magenta] "
            "[cyan]- Build Discord Bots Like a Pro[/cyan]"
        )
        body = Text()
        body.append(
            "A modern, production-ready framework for building scalable Discord bots\n",
            style="bold white",
        )
        for heading, items in FEATURE_OVERVIEW:
            body.append(f"\n{heading}\n", style="cyan")
            for item in items:
                body.append("• ", style="green")
                body.append(f"{item}\n", style="white")
        self.console.print(Panel(body, title="[bold magenta]Why DiscoBase[/bold magenta]"))

    def progress(self, message: str) -> AbstractContextManager:
        return self.console.status(message, spinner="dots")

    def success(self, message: str) -> None:
        print_success(f"✓ {message}", self.console)

    def warning(self, message: str) -> None:
        print_warning(message, self.console)

    def error(self, message: str) -> None:
        print_error(message, self.console)

    def manual_install(self, steps: list[str]) -> None:
        print_warning("Please install packages manually:", self.console)
        for step in steps:
            self.console.print(f"   [dim]{step}[/dim]")

    def summary(self, next_steps: list[str]) -> None:
        body = Text()
        body.append("✓ ", style="bold green")
        body.append("Project created successfully!\n\n", style="bold white")
        body.append("Next Steps:\n", style="bold cyan")
        for i, step in enumerate(next_steps, start=1):
            body.append(f"  {i}. ", style="green")
            body.append(f"{step}\n", style="bold white")
        body.append("\nResources:\n", style="bold blue")
        for label, url in (
            ("Documentation", DOCS_URL),
            ("Discord Server", DISCORD_URL),
            ("GitHub", GITHUB_URL),
        ):
            body.append(f"  {label}: ", style="white")
            body.append(f"{url}\n", style="underline cyan")
        self.console.print()
        self.console.print(Panel(body, title="[bold green]Setup Complete[/bold green]"))
        self.console.print("[bold cyan]Happy coding! Let's build something amazing![/bold cyan]")

    def cancelled(self) -> None:
        print_error("Setup cancelled", self.console)
