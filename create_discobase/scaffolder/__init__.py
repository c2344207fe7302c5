"""create-discobase scaffolder -- materializes DiscoBase bot projects.

Quick usage::

    from create_discobase.models import Answers
    from create_discobase.scaffolder import ProjectGenerator, resolve_destination

    answers = Answers(project_name="my-bot", include_dashboard=False)
    target = resolve_destination(answers.location_mode, answers.project_name, "/tmp")
    result = await ProjectGenerator().generate(answers, target)
"""

from create_discobase.scaffolder.core_gen import CoreGenerator, CoreTemplateContext
from create_discobase.scaffolder.dependencies import plan_dependencies
from create_discobase.scaffolder.destination import prepare_destination, resolve_destination
from create_discobase.scaffolder.generator import GenerationResult, ProjectGenerator
from create_discobase.scaffolder.source_copy import SourceCopier
from create_discobase.scaffolder.templates import TemplateRenderer

__all__ = [
    "CoreGenerator",
    "CoreTemplateContext",
    "GenerationResult",
    "ProjectGenerator",
    "SourceCopier",
    "TemplateRenderer",
    "plan_dependencies",
    "prepare_destination",
    "resolve_destination",
]
