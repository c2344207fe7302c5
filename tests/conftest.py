"""Shared pytest fixtures for the create-discobase test suite.

Provides reusable fixtures for:
- A temporary working directory standing in for the user's cwd
- A fake full-source template tree
- Scripted prompts and a recording reporter
- Filesystems that fail on demand
- Mock subprocess helpers
"""

from __future__ import annotations

from contextlib import nullcontext
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from create_discobase.config import Config
from create_discobase.errors import UserCancelled
from create_discobase.filesystem import LocalFileSystem
from create_discobase.prompts import Prompter
from create_discobase.reporter import Reporter


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Directory the generator is "run from"."""
    path = tmp_path / "workspace"
    path.mkdir()
    yield path


SOURCE_TREE: dict[str, str] = {
    "package.json": '{\n  "name": "discobase"\n}',
    "config.json": '{\n  "bot": {}\n}',
    "README.md": "# DiscoBase\n",
    "setup.mjs": "#!/usr/bin/env node\n",
    "package-lock.json": "{}",
    ".git/HEAD": "ref: refs/heads/main\n",
    "node_modules/discord.js/index.js": "module.exports = {};\n",
    "admin/dashboard.js": "module.exports = (client) => {};\n",
    "admin/public/index.html": "<html><body>Dashboard</body></html>\n",
    "src/index.js": "require('./handlers');\n",
    "src/commands/Community/ping.js": "module.exports = {};\n",
    "src/events/ready.js": "module.exports = {};\n",
}


@pytest.fixture
def source_template(tmp_path: Path) -> Path:
    """A miniature ``create-discobase`` source tree, including excluded entries."""
    root = tmp_path / "create-discobase"
    for rel, content in SOURCE_TREE.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    # binary asset to check byte-for-byte copying
    (root / "admin" / "public" / "logo.png").write_bytes(bytes(range(256)))
    yield root


@pytest.fixture
def config(workdir: Path, source_template: Path) -> Config:
    return Config(cwd=workdir, source_template_dir=source_template)


def tree_snapshot(root: Path) -> dict[str, bytes]:
    """Map every file under *root* (posix relative path) to its bytes."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


@pytest.fixture
def snapshot():
    """The ``tree_snapshot`` helper, for comparing directory trees."""
    return tree_snapshot


# ---------------------------------------------------------------------------
# Prompts & reporting
# ---------------------------------------------------------------------------

class ScriptedPrompter(Prompter):
    """Replays queued answers; ``CANCEL`` in the queue simulates Ctrl-C."""

    CANCEL = object()

    def __init__(self, *answers: Any) -> None:
        self.answers = list(answers)
        self.asked: list[str] = []
        self.validation_errors: list[str] = []

    def _next(self, message: str) -> Any:
        self.asked.append(message)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {message}")
        value = self.answers.pop(0)
        if value is self.CANCEL:
            raise UserCancelled()
        return value

    def select_one(self, message, choices):
        value = self._next(message)
        assert value in [c.value for c in choices]
        return value

    def confirm_yes_no(self, message, default=True):
        return self._next(message)

    def text_input(self, message, placeholder="", validate=None):
        while True:
            value = self._next(message)
            problem = validate(value) if validate else None
            if problem is None:
                return value
            self.validation_errors.append(problem)


class RecordingReporter(Reporter):
    """Collects every reporter call as ``(kind, payload)`` tuples."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.events]

    def messages(self, kind: str) -> list[Any]:
        return [payload for k, payload in self.events if k == kind]

    def intro(self):
        self.events.append(("intro", None))

    def progress(self, message):
        self.events.append(("progress", message))
        return nullcontext()

    def success(self, message):
        self.events.append(("success", message))

    def warning(self, message):
        self.events.append(("warning", message))

    def error(self, message):
        self.events.append(("error", message))

    def manual_install(self, steps):
        self.events.append(("manual_install", steps))

    def summary(self, next_steps):
        self.events.append(("summary", next_steps))

    def cancelled(self):
        self.events.append(("cancelled", None))


@pytest.fixture
def scripted_prompter():
    """Factory: ``scripted_prompter("core", "new", "my-bot", True, ...)``."""
    return ScriptedPrompter


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


# ---------------------------------------------------------------------------
# Failing filesystem
# ---------------------------------------------------------------------------

class FailingFileSystem(LocalFileSystem):
    """Raises ``PermissionError`` when a write/copy touches *fail_on*."""

    def __init__(self, fail_on: str) -> None:
        self.fail_on = fail_on

    def _check(self, path: Path) -> None:
        if Path(path).name == self.fail_on:
            raise PermissionError(13, "Permission denied", str(path))

    def write_file(self, path, content):
        self._check(path)
        super().write_file(path, content)

    def make_directories(self, path):
        self._check(path)
        super().make_directories(path)

    def copy_tree(self, src, dst):
        self._check(dst)
        super().copy_tree(src, dst)

    def copy_file(self, src, dst):
        self._check(dst)
        super().copy_file(src, dst)


@pytest.fixture
def failing_fs():
    """Factory: ``failing_fs("package.json")`` fails on that entry name."""
    return FailingFileSystem


# ---------------------------------------------------------------------------
# Mock Subprocess (generic)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
