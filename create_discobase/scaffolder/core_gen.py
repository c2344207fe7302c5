"""Core Edition generator.

Creates the ``src/`` skeleton and writes the seven starter files of a
package-based DiscoBase bot.  JSON documents are built from dicts so their
key order and nesting stay exact; the JavaScript and Markdown files come from
the ``templates/core/`` Jinja2 templates.
"""

from __future__ import annotations

import asyncio
import json
import re
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from create_discobase.errors import WriteFailure
from create_discobase.filesystem import LocalFileSystem
from create_discobase.models import Answers, FileSpec
from .templates import TemplateRenderer

DIRECTORIES: tuple[str, ...] = (
    "src/commands/Community",
    "src/messages/Community",
    "src/events",
    "src/functions",
    "src/schemas",
)

CONFIG_FILE = "config.json"
SETTINGS_FILE = "discobase.json"
SLASH_COMMAND_FILE = "src/commands/Community/ping.js"
PREFIX_COMMAND_FILE = "src/messages/Community/ping.js"
ENTRY_POINT_FILE = "src/index.js"
MANIFEST_FILE = "package.json"
README_FILE = "README.md"


class CoreTemplateContext(BaseModel):
    """Values the Core Edition files are parameterized by."""

    project_name: str = Field(..., min_length=1)
    include_dashboard: bool = Field(default=True)
    install_database_support: bool = Field(default=True)

    @classmethod
    def from_answers(cls, answers: Answers, project_name: str) -> "CoreTemplateContext":
        return cls(
            project_name=project_name,
            include_dashboard=answers.include_dashboard,
            install_database_support=answers.install_database_support,
        )


# ---------------------------------------------------------------------------
# JSON documents
# ---------------------------------------------------------------------------

def _dump_json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def manifest_name(project_name: str) -> str:
    """Lower-case *project_name* and collapse whitespace runs to one hyphen."""
    return re.sub(r"\s+", "-", project_name.lower())


def render_config_json() -> str:
    """Credential and integration placeholders the user fills in later."""
    return _dump_json({
        "bot": {
            "token": "YOUR_BOT_TOKEN_HERE",
            "id": "YOUR_BOT_ID_HERE",
            "admins": ["ADMIN_USER_ID_1", "ADMIN_USER_ID_2"],
            "ownerId": "YOUR_OWNER_ID_HERE",
            "developerCommandsServerIds": ["DEV_SERVER_ID_1"],
        },
        "database": {
            "mongodbUrl": "YOUR_MONGODB_URL_HERE",
        },
        "logging": {
            "guildJoinLogsId": "GUILD_JOIN_LOGS_CHANNEL_ID",
            "guildLeaveLogsId": "GUILD_LEAVE_LOGS_CHANNEL_ID",
            "commandLogsChannelId": "COMMAND_LOGS_CHANNEL_ID",
            "errorLogs": "YOUR_ERROR_WEBHOOK_URL_HERE",
        },
        "prefix": {
            "value": "!",
        },
    })


def render_settings_json() -> str:
    """Framework toggles; the ``//_*_note`` keys are comments for the user."""
    return _dump_json({
        "errorLogging": {"enabled": False},
        "presence": {
            "enabled": False,
            "status": "dnd",
            "interval": 10000,
            "type": "PLAYING",
            "names": ["with DiscoBase", "with commands", "with your server", "DiscoBase v3.0"],
            "//_streamingUrl_note": "!=! This is only for the STREAMING activity type !=!",
            "streamingUrl": "https://www.twitch.tv/example",
            "//_customState_note": "!=! This is only for the CUSTOM activity type !=!",
            "customState": "🚀 discobase!",
        },
        "commandStats": {
            "enabled": True,
            "trackUsage": True,
            "trackServers": True,
            "trackUsers": True,
        },
        "activityTracker": {
            "enabled": True,
            "ignoredPaths": ["**/node_modules/**", ".git", ".gitignore", "discobase.json"],
        },
    })


def render_manifest(context: CoreTemplateContext) -> str:
    return _dump_json({
        "name": manifest_name(context.project_name),
        "version": "1.0.0",
        "description": "My Discord bot built with DiscoBase",
        "main": "src/index.js",
        "scripts": {
            "start": "node src/index.js",
            "dev": "nodemon src/index.js",
            "generate": "node node_modules/discobase-core/cli.js",
            "manage": "node node_modules/discobase-core/manage.js",
        },
        "keywords": ["discord", "bot"],
        "author": "",
        "license": "ISC",
        "devDependencies": {
            "nodemon": "^3.1.7",
        },
    })


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class CoreGenerator:
    """Synthesizes a Core Edition project into an empty directory."""

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        fs: LocalFileSystem | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.fs = fs or LocalFileSystem()

    # -- Rendering ---------------------------------------------------------

    def render_slash_command(self) -> str:
        return self.renderer.render("core/slash_command.js.j2", {})

    def render_prefix_command(self) -> str:
        return self.renderer.render("core/prefix_command.js.j2", {})

    def render_entry_point(self, context: CoreTemplateContext) -> str:
        return self.renderer.render("core/index.js.j2", context.model_dump())

    def render_readme(self, context: CoreTemplateContext) -> str:
        return self.renderer.render("core/README.md.j2", context.model_dump())

    def build_file_specs(self, context: CoreTemplateContext) -> list[FileSpec]:
        """Return every generated file; the set never depends on toggles."""
        return [
            FileSpec(CONFIG_FILE, render_config_json()),
            FileSpec(SETTINGS_FILE, render_settings_json()),
            FileSpec(SLASH_COMMAND_FILE, self.render_slash_command()),
            FileSpec(PREFIX_COMMAND_FILE, self.render_prefix_command()),
            FileSpec(ENTRY_POINT_FILE, self.render_entry_point(context)),
            FileSpec(MANIFEST_FILE, render_manifest(context)),
            FileSpec(README_FILE, self.render_readme(context)),
        ]

    # -- Writing -----------------------------------------------------------

    async def create_directory_structure(self, root: Path) -> list[Path]:
        """Create the ``src/`` skeleton, including the empty folders."""
        created: list[Path] = []
        for d in DIRECTORIES:
            path = root / d
            try:
                await asyncio.to_thread(self.fs.make_directories, path)
            except OSError as exc:
                raise WriteFailure(path, created) from exc
            created.append(path)
        return created

    async def write_files(
        self,
        root: Path,
        specs: list[FileSpec],
        written: list[Path] | None = None,
    ) -> list[Path]:
        """Write *specs* under *root*, stopping at the first failure."""
        written = list(written or [])
        for spec in specs:
            path = root / spec.relative_path
            try:
                await asyncio.to_thread(self.fs.write_file, path, spec.content)
            except OSError as exc:
                raise WriteFailure(path, written) from exc
            written.append(path)
        return written
