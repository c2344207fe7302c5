"""Main scaffolding orchestrator.

Takes the collected ``Answers`` and a ``ResolvedTarget`` and materializes the
project with the algorithm matching the chosen edition.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from create_discobase.config import DEFAULT_SOURCE_TEMPLATE_DIR
from create_discobase.filesystem import LocalFileSystem
from create_discobase.models import Answers, DependencyPlan, Edition, ResolvedTarget
from .core_gen import CoreGenerator, CoreTemplateContext
from .dependencies import plan_dependencies
from .destination import prepare_destination
from .source_copy import SourceCopier
from .templates import TemplateRenderer


@dataclass
class GenerationResult:
    """What a generation run produced."""

    root: Path
    edition: Edition
    written: list[Path] = field(default_factory=list)
    dependencies: DependencyPlan = field(default_factory=DependencyPlan)


class ProjectGenerator:
    """Materializes a DiscoBase project.

    ``CORE_TEMPLATE`` synthesizes the skeleton and starter files;
    ``FULL_SOURCE`` copies the full template tree.
    """

    def __init__(
        self,
        source_template_dir: str | Path = DEFAULT_SOURCE_TEMPLATE_DIR,
        fs: LocalFileSystem | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.fs = fs or LocalFileSystem()
        self.core_gen = CoreGenerator(renderer or TemplateRenderer(), self.fs)
        self.source_copier = SourceCopier(source_template_dir, self.fs)

    async def prepare(self, target: ResolvedTarget) -> Path:
        """Create the destination directory after re-checking it is empty."""
        return await asyncio.to_thread(prepare_destination, target, self.fs)

    async def generate_core(self, answers: Answers, target: ResolvedTarget) -> list[Path]:
        context = CoreTemplateContext.from_answers(answers, target.project_name)
        created = await self.core_gen.create_directory_structure(target.path)
        specs = self.core_gen.build_file_specs(context)
        return await self.core_gen.write_files(target.path, specs, created)

    async def generate_source(self, answers: Answers, target: ResolvedTarget) -> list[Path]:
        return await self.source_copier.copy(target.path, answers.include_dashboard)

    async def generate(self, answers: Answers, target: ResolvedTarget) -> GenerationResult:
        """Prepare the destination, write the project and plan its packages.

        Raises:
            DestinationNotEmptyError: The target gained entries since it was
                resolved.
            MaterializeError: A copy or write failed; earlier output stays.
        """
        root = await self.prepare(target)
        if answers.edition is Edition.FULL_SOURCE:
            written = await self.generate_source(answers, target)
        else:
            written = await self.generate_core(answers, target)

        return GenerationResult(
            root=root,
            edition=answers.edition,
            written=written,
            dependencies=plan_dependencies(answers),
        )
