"""Destination directory resolution.

Turns the location answers into an absolute ``ResolvedTarget`` and enforces
that generation only ever starts in a missing or empty directory.
"""

from __future__ import annotations

from pathlib import Path

from create_discobase.errors import DestinationNotEmptyError, WriteFailure
from create_discobase.filesystem import LocalFileSystem
from create_discobase.models import LocationMode, ResolvedTarget, validate_project_name


def resolve_destination(
    location_mode: LocationMode,
    project_name: str | None,
    cwd: str | Path,
    fs: LocalFileSystem | None = None,
) -> ResolvedTarget:
    """Compute and validate the target directory.

    Nothing is created here; see :func:`prepare_destination`.

    Raises:
        InvalidNameError: *project_name* is empty, too long or contains
            characters outside ``[A-Za-z0-9-_]`` (new-folder mode only).
        DestinationNotEmptyError: The target exists and has entries.
    """
    fs = fs or LocalFileSystem()
    base = Path(cwd).resolve()

    if location_mode is LocationMode.NEW_FOLDER:
        name = validate_project_name(project_name or "")
        target = ResolvedTarget(path=base / name, project_name=name, created_folder=True)
    else:
        target = ResolvedTarget(path=base, project_name=base.name, created_folder=False)

    _check_empty(target, fs)
    return target


def prepare_destination(target: ResolvedTarget, fs: LocalFileSystem | None = None) -> Path:
    """Re-check emptiness and create the target directory if needed."""
    fs = fs or LocalFileSystem()
    _check_empty(target, fs)
    if not fs.exists(target.path):
        try:
            fs.make_directories(target.path)
        except OSError as exc:
            raise WriteFailure(target.path) from exc
    return target.path


def _check_empty(target: ResolvedTarget, fs: LocalFileSystem) -> None:
    if fs.exists(target.path) and fs.list_entries(target.path):
        raise DestinationNotEmptyError(target.path, target.project_name)
