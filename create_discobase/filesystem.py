"""Local filesystem capability used by the scaffolding stages.

Stages never touch ``pathlib``/``shutil`` directly; they go through a
``LocalFileSystem`` instance so tests can substitute a failing one.
"""

from __future__ import annotations

import shutil
from pathlib import Path


class LocalFileSystem:
    """Thin wrapper around ``pathlib`` and ``shutil``."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def list_entries(self, path: Path) -> list[str]:
        """Return the sorted names of the immediate children of *path*."""
        return sorted(p.name for p in Path(path).iterdir())

    def is_directory(self, path: Path) -> bool:
        return Path(path).is_dir()

    def make_directories(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def copy_tree(self, src: Path, dst: Path) -> None:
        shutil.copytree(src, dst, symlinks=True, dirs_exist_ok=True)

    def copy_file(self, src: Path, dst: Path) -> None:
        Path(dst).parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dst)

    def remove_tree(self, path: Path) -> None:
        shutil.rmtree(path)

    def write_file(self, path: Path, content: str) -> None:
        """Write *content* as UTF-8, creating parent directories first."""
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the template's "\n" line endings on every platform
        with out.open("w", encoding="utf-8", newline="") as fh:
            fh.write(content)
