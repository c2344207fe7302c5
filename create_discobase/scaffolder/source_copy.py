"""Source Edition generator.

Copies the full ``create-discobase`` template tree into the destination,
skipping repository and installer artefacts, then drops the admin dashboard
when the user declined it.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from create_discobase.config import SOURCE_TEMPLATE_ENV
from create_discobase.errors import CopyFailure
from create_discobase.filesystem import LocalFileSystem
from create_discobase.models import CopyFromSource, FileSpec

EXCLUDED_ENTRIES: frozenset[str] = frozenset({
    ".git",
    "node_modules",
    "setup.mjs",
    "package-lock.json",
})

DASHBOARD_DIR = "admin"


class SourceCopier:
    """Duplicates a template directory, minus ``EXCLUDED_ENTRIES``."""

    def __init__(self, source_dir: str | Path, fs: LocalFileSystem | None = None) -> None:
        self.source_dir = Path(source_dir)
        self.fs = fs or LocalFileSystem()

    def build_file_specs(self) -> list[FileSpec]:
        """One spec per top-level template entry that is not excluded."""
        if not self.fs.is_directory(self.source_dir):
            raise CopyFailure(self.source_dir) from FileNotFoundError(
                f"Source template not found: {self.source_dir} "
                f"(set {SOURCE_TEMPLATE_ENV} to a create-discobase checkout)"
            )
        return [
            FileSpec(name, CopyFromSource(self.source_dir / name))
            for name in self.fs.list_entries(self.source_dir)
            if name not in EXCLUDED_ENTRIES
        ]

    async def copy(self, root: Path, include_dashboard: bool) -> list[Path]:
        """Copy every planned entry into *root*.

        Returns:
            The top-level destination paths that were copied.

        Raises:
            CopyFailure: On the first entry that cannot be copied; entries
                copied before it stay in place.
        """
        copied: list[Path] = []
        for spec in self.build_file_specs():
            src = self.source_dir / spec.relative_path
            dst = root / spec.relative_path
            try:
                if self.fs.is_directory(src):
                    await asyncio.to_thread(self.fs.copy_tree, src, dst)
                else:
                    await asyncio.to_thread(self.fs.copy_file, src, dst)
            except OSError as exc:
                raise CopyFailure(dst, copied) from exc
            copied.append(dst)

        if not include_dashboard:
            copied = await self.remove_dashboard(root, copied)
        return copied

    async def remove_dashboard(self, root: Path, copied: list[Path]) -> list[Path]:
        dashboard = root / DASHBOARD_DIR
        if not self.fs.exists(dashboard):
            return copied
        try:
            await asyncio.to_thread(self.fs.remove_tree, dashboard)
        except OSError as exc:
            raise CopyFailure(dashboard, copied) from exc
        return [p for p in copied if p != dashboard]
