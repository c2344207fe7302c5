"""Pydantic v2 models for the project generator.

Defines the answers collected from the user, the resolved destination, and
the declarative descriptions of what gets written to disk.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from create_discobase.errors import InvalidNameError

MAX_PROJECT_NAME_LENGTH = 50
PROJECT_NAME_PATTERN = re.compile(r"[a-z0-9_-]+", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class Edition(str, Enum):
    """Which generation algorithm to run."""
    CORE_TEMPLATE = "core"
    FULL_SOURCE = "source"


class LocationMode(str, Enum):
    """Where the project is created."""
    NEW_FOLDER = "new"
    CURRENT_DIRECTORY = "current"


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def project_name_error(value: str) -> str | None:
    """Return the validation message for *value*, or ``None`` if it is valid."""
    if not value:
        return "Project name is required"
    if len(value) > MAX_PROJECT_NAME_LENGTH:
        return "Project name is too long"
    if not PROJECT_NAME_PATTERN.fullmatch(value):
        return "Use only letters, numbers, hyphens, and underscores"
    return None


def validate_project_name(value: str) -> str:
    """Return *value* unchanged or raise ``InvalidNameError``."""
    reason = project_name_error(value)
    if reason is not None:
        raise InvalidNameError(value, reason)
    return value


# ---------------------------------------------------------------------------
# Answers & destination
# ---------------------------------------------------------------------------

class Answers(BaseModel):
    """Every choice collected before generation starts.

    ``project_name`` is only required for ``LocationMode.NEW_FOLDER``; for the
    current directory the name is derived from the directory itself.
    """

    model_config = ConfigDict(frozen=True)

    edition: Edition = Field(default=Edition.CORE_TEMPLATE)
    location_mode: LocationMode = Field(default=LocationMode.NEW_FOLDER)
    project_name: str = Field(default="")
    include_dashboard: bool = Field(default=True)
    install_dependencies: bool = Field(default=True)
    install_database_support: bool = Field(default=True)

    @model_validator(mode="after")
    def _check_project_name(self) -> "Answers":
        if self.location_mode is LocationMode.NEW_FOLDER:
            reason = project_name_error(self.project_name)
            if reason is not None:
                raise ValueError(reason)
        return self


class ResolvedTarget(BaseModel):
    """Absolute destination directory plus the effective project name."""

    model_config = ConfigDict(frozen=True)

    path: Path
    project_name: str
    created_folder: bool = Field(
        default=True, description="False when generating into the current directory"
    )


# ---------------------------------------------------------------------------
# Declarative file descriptions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CopyFromSource:
    """Marker content: copy *source* byte-for-byte (file or whole directory)."""

    source: Path


@dataclass(frozen=True)
class FileSpec:
    """A single entry to materialize, relative to the destination root."""

    relative_path: str
    content: Union[str, CopyFromSource]


@dataclass(frozen=True)
class DependencyPlan:
    """Ordered, duplicate-free package identifiers to hand to the installer."""

    packages: tuple[str, ...] = ()

    @classmethod
    def from_iterable(cls, packages) -> "DependencyPlan":
        return cls(tuple(dict.fromkeys(packages)))

    def __iter__(self) -> Iterator[str]:
        return iter(self.packages)

    def __len__(self) -> int:
        return len(self.packages)

    def __contains__(self, item: object) -> bool:
        return item in self.packages

    def as_list(self) -> list[str]:
        return list(self.packages)
