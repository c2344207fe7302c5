"""Package list computation for the generated bot.

Both editions share ``BASE_PACKAGES``; toggles only ever append.
"""

from __future__ import annotations

from create_discobase.models import Answers, DependencyPlan, Edition

BASE_PACKAGES: tuple[str, ...] = (
    "discobase-core@latest",
    "discord.js",
    "nodemon",
    "multer",
    "figlet",
    "micromatch",
    "cli-progress",
    "chalk@4",
    "fs-extra",
    "gradient-string",
    "chokidar",
    "axios",
    "set-interval-async",
    "boxen",
    "@clack/prompts",
)

DATABASE_PACKAGES: tuple[str, ...] = ("mongoose",)

# The Source Edition ships its own admin/ server code, so only the Core
# Edition needs the web server packages.
DASHBOARD_PACKAGES: tuple[str, ...] = ("express", "cors")


def plan_dependencies(answers: Answers) -> DependencyPlan:
    """Return base packages, then database extras, then dashboard extras."""
    packages = list(BASE_PACKAGES)
    if answers.install_database_support:
        packages.extend(DATABASE_PACKAGES)
    if answers.edition is Edition.CORE_TEMPLATE and answers.include_dashboard:
        packages.extend(DASHBOARD_PACKAGES)
    return DependencyPlan.from_iterable(packages)
