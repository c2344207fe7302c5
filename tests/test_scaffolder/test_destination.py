"""Tests for destination resolution (create_discobase.scaffolder.destination).

Covers:
- New-folder and current-directory targets
- Name validation never creating anything
- Non-empty destination refusal
- prepare_destination creation and re-check
"""

from __future__ import annotations

from pathlib import Path

import pytest

from create_discobase.errors import DestinationNotEmptyError, InvalidNameError, WriteFailure
from create_discobase.models import LocationMode, ResolvedTarget
from create_discobase.scaffolder.destination import prepare_destination, resolve_destination

pytestmark = pytest.mark.unit


class TestResolveNewFolder:
    def test_joins_cwd_and_name(self, workdir: Path):
        target = resolve_destination(LocationMode.NEW_FOLDER, "my-bot", workdir)
        assert target.path == workdir.resolve() / "my-bot"
        assert target.path.is_absolute()
        assert target.project_name == "my-bot"
        assert target.created_folder is True

    def test_does_not_create_directory(self, workdir: Path):
        target = resolve_destination(LocationMode.NEW_FOLDER, "my-bot", workdir)
        assert not target.path.exists()

    def test_existing_empty_directory_is_accepted(self, workdir: Path):
        (workdir / "my-bot").mkdir()
        target = resolve_destination(LocationMode.NEW_FOLDER, "my-bot", workdir)
        assert target.path.is_dir()

    @pytest.mark.parametrize("name", ["", "has space", "x" * 51, "../up", "bad!"])
    def test_invalid_names_create_nothing(self, workdir: Path, name: str):
        with pytest.raises(InvalidNameError):
            resolve_destination(LocationMode.NEW_FOLDER, name, workdir)
        assert list(workdir.iterdir()) == []

    def test_none_name_is_invalid(self, workdir: Path):
        with pytest.raises(InvalidNameError) as exc_info:
            resolve_destination(LocationMode.NEW_FOLDER, None, workdir)
        assert exc_info.value.reason == "Project name is required"

    def test_non_empty_directory_refused(self, workdir: Path):
        existing = workdir / "my-bot"
        existing.mkdir()
        (existing / "keep.txt").write_text("data", encoding="utf-8")

        with pytest.raises(DestinationNotEmptyError) as exc_info:
            resolve_destination(LocationMode.NEW_FOLDER, "my-bot", workdir)
        assert exc_info.value.project_name == "my-bot"
        assert str(exc_info.value) == "Directory my-bot already exists and is not empty!"
        assert [p.name for p in existing.iterdir()] == ["keep.txt"]

    def test_hidden_entry_counts_as_non_empty(self, workdir: Path):
        existing = workdir / "my-bot"
        existing.mkdir()
        (existing / ".git").mkdir()
        with pytest.raises(DestinationNotEmptyError):
            resolve_destination(LocationMode.NEW_FOLDER, "my-bot", workdir)


class TestResolveCurrentDirectory:
    def test_uses_cwd_and_basename(self, workdir: Path):
        target = resolve_destination(LocationMode.CURRENT_DIRECTORY, None, workdir)
        assert target.path == workdir.resolve()
        assert target.project_name == "workspace"
        assert target.created_folder is False

    def test_name_input_is_ignored(self, workdir: Path):
        target = resolve_destination(LocationMode.CURRENT_DIRECTORY, "not valid!", workdir)
        assert target.project_name == "workspace"

    def test_basename_not_subject_to_naming_rule(self, tmp_path: Path):
        odd = tmp_path / "My Bot Folder"
        odd.mkdir()
        target = resolve_destination(LocationMode.CURRENT_DIRECTORY, None, odd)
        assert target.project_name == "My Bot Folder"

    def test_non_empty_cwd_refused(self, workdir: Path):
        (workdir / "notes.md").write_text("hi", encoding="utf-8")
        with pytest.raises(DestinationNotEmptyError):
            resolve_destination(LocationMode.CURRENT_DIRECTORY, None, workdir)


class TestPrepareDestination:
    def test_creates_missing_directory_recursively(self, tmp_path: Path):
        target = ResolvedTarget(path=tmp_path / "a" / "b" / "my-bot", project_name="my-bot")
        path = prepare_destination(target)
        assert path.is_dir()

    def test_existing_empty_directory_untouched(self, workdir: Path):
        target = ResolvedTarget(path=workdir, project_name="workspace", created_folder=False)
        assert prepare_destination(target) == workdir
        assert list(workdir.iterdir()) == []

    def test_rechecks_emptiness(self, workdir: Path):
        target = resolve_destination(LocationMode.NEW_FOLDER, "my-bot", workdir)
        target.path.mkdir()
        (target.path / "late.txt").write_text("x", encoding="utf-8")
        with pytest.raises(DestinationNotEmptyError):
            prepare_destination(target)

    def test_creation_failure_is_write_failure(self, workdir: Path, failing_fs):
        target = resolve_destination(LocationMode.NEW_FOLDER, "my-bot", workdir)
        with pytest.raises(WriteFailure) as exc_info:
            prepare_destination(target, failing_fs("my-bot"))
        assert isinstance(exc_info.value.__cause__, PermissionError)
        assert exc_info.value.written == []
