"""create-discobase setup pipeline.

Drives one interactive run end to end:

1. COLLECT   -- ask edition, location and project name, then validate the
               destination before asking the feature toggles.
2. GENERATE  -- create the destination and copy or synthesize the project.
3. INSTALL   -- best-effort package install; failure only degrades to
               manual instructions.
4. SUMMARY   -- next steps and resource links.

Usage::

    create-discobase
    python -m create_discobase
"""

from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass

from create_discobase.config import Config
from create_discobase.errors import (
    DestinationNotEmptyError,
    MaterializeError,
    SetupError,
    UserCancelled,
)
from create_discobase.filesystem import LocalFileSystem
from create_discobase.installer import Installer, InstallResult
from create_discobase.models import (
    Answers,
    Edition,
    LocationMode,
    ResolvedTarget,
    project_name_error,
)
from create_discobase.prompts import (
    EDITION_CHOICES,
    LOCATION_CHOICES,
    ConsolePrompter,
    Prompter,
)
from create_discobase.reporter import (
    ConsoleReporter,
    Reporter,
    build_manual_install_steps,
    build_next_steps,
)
from create_discobase.scaffolder import GenerationResult, ProjectGenerator, resolve_destination
from create_discobase.utils import format_duration

EXIT_OK = 0
EXIT_FAILURE = 1


@dataclass
class SetupResult:
    """Everything a completed run produced."""

    answers: Answers
    target: ResolvedTarget
    generation: GenerationResult
    install: InstallResult | None = None


class SetupPipeline:
    """Interactive project generation, one project per instance.

    Attributes:
        config: Generator configuration.
        prompter: Source of user answers.
        reporter: Sink for every user-visible message.
    """

    def __init__(
        self,
        config: Config | None = None,
        prompter: Prompter | None = None,
        reporter: Reporter | None = None,
        fs: LocalFileSystem | None = None,
        installer: Installer | None = None,
    ) -> None:
        self.config = config or Config()
        self.prompter = prompter or ConsolePrompter()
        self.reporter = reporter or Reporter()
        self.fs = fs or LocalFileSystem()
        self.installer = installer or Installer(
            self.config.package_manager, self.config.install_timeout
        )
        self.generator = ProjectGenerator(self.config.source_template_dir, self.fs)

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    async def run(self) -> int:
        """Run the full interactive flow and return the process exit code."""
        self.reporter.intro()

        try:
            answers, target = self.collect_answers()
        except UserCancelled:
            self.reporter.cancelled()
            return EXIT_OK
        except DestinationNotEmptyError as exc:
            self.reporter.error(str(exc))
            self.reporter.cancelled()
            return EXIT_FAILURE
        except SetupError as exc:
            self.reporter.error(str(exc))
            return EXIT_FAILURE

        try:
            result = await self.execute(answers, target)
        except DestinationNotEmptyError as exc:
            self.reporter.error(str(exc))
            self.reporter.cancelled()
            return EXIT_FAILURE
        except MaterializeError as exc:
            self.reporter.error(f"{exc}: {exc.__cause__}")
            if exc.written:
                self.reporter.warning(
                    f"{len(exc.written)} entries were already created in {target.path} "
                    "and have been left in place."
                )
            return EXIT_FAILURE
        except SetupError as exc:
            self.reporter.error(f"An error occurred: {exc}")
            return EXIT_FAILURE

        self.reporter.summary(build_next_steps(answers, result.target.project_name))
        return EXIT_OK

    # ------------------------------------------------------------------
    # Stage 1: collect
    # ------------------------------------------------------------------

    def collect_answers(self) -> tuple[Answers, ResolvedTarget]:
        """Ask every question; the destination is checked as soon as it is known.

        Raises:
            UserCancelled: The user aborted a prompt.
            DestinationNotEmptyError: The chosen directory has entries.
        """
        edition = Edition(
            self.prompter.select_one("Which version would you like to use?", EDITION_CHOICES)
        )
        location_mode = LocationMode(
            self.prompter.select_one(
                "Where would you like to create your project?", LOCATION_CHOICES
            )
        )

        project_name = ""
        if location_mode is LocationMode.NEW_FOLDER:
            project_name = self.prompter.text_input(
                "What is your project name?",
                placeholder="my-discord-bot",
                validate=project_name_error,
            )

        target = resolve_destination(location_mode, project_name, self.config.cwd, self.fs)

        include_dashboard = self.prompter.confirm_yes_no(
            "Would you like to include the admin dashboard?", default=True
        )
        install_dependencies = self.prompter.confirm_yes_no(
            "Install required packages? (discobase-core, discord.js, etc.) [Recommended]",
            default=True,
        )
        install_database_support = self.prompter.confirm_yes_no(
            "Install MongoDB support? (mongoose)", default=True
        )

        answers = Answers(
            edition=edition,
            location_mode=location_mode,
            project_name=project_name,
            include_dashboard=include_dashboard,
            install_dependencies=install_dependencies,
            install_database_support=install_database_support,
        )
        return answers, target

    # ------------------------------------------------------------------
    # Stages 2 and 3: generate, install
    # ------------------------------------------------------------------

    async def execute(self, answers: Answers, target: ResolvedTarget) -> SetupResult:
        """Generate the project for pre-collected *answers*, then install.

        Raises:
            DestinationNotEmptyError: The target gained entries meanwhile.
            MaterializeError: A copy or write failed.
        """
        if answers.edition is Edition.FULL_SOURCE:
            message = "Copying full source code template..."
            done = "Full source code copied successfully!"
        else:
            message = "Creating project structure and configuration files..."
            done = "Project structure and configuration files generated"

        with self.reporter.progress(message):
            generation = await self.generator.generate(answers, target)
        self.reporter.success(done)

        result = SetupResult(answers=answers, target=target, generation=generation)
        if answers.install_dependencies:
            result.install = await self.install(generation, target)
        else:
            self.reporter.warning("Skipped package installation. Run npm install manually.")
        return result

    async def install(self, generation: GenerationResult, target: ResolvedTarget) -> InstallResult:
        """Install the planned packages; failures are reported, not raised."""
        plan = generation.dependencies
        with self.reporter.progress(f"Installing packages ({len(plan)} packages)..."):
            outcome = await self.installer.install(plan, generation.root)

        if outcome.success:
            self.reporter.success(
                f"Installed {len(plan)} packages successfully "
                f"in {format_duration(outcome.duration_seconds)}"
            )
        else:
            self.reporter.error(f"Failed to install dependencies: {outcome.error}")
            self.reporter.manual_install(
                build_manual_install_steps(
                    target.project_name, outcome.manual_command(), target.created_folder
                )
            )
        return outcome


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """CLI entry point for ``create-discobase``."""
    config = Config.from_env()
    pipeline = SetupPipeline(config, ConsolePrompter(), ConsoleReporter())
    try:
        code = asyncio.run(pipeline.run())
    except KeyboardInterrupt:
        pipeline.reporter.cancelled()
        code = EXIT_OK
    except Exception as exc:
        pipeline.reporter.error(f"An error occurred: {exc}")
        code = EXIT_FAILURE
    sys.exit(code)


if __name__ == "__main__":
    main()
