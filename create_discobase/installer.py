"""Package-manager invocation for the generated project.

Runs ``npm install <packages...>`` (or the configured package manager) in the
destination directory with a bounded timeout.  Failures never propagate: they
come back as an unsuccessful ``InstallResult`` so generation still counts as
done.
"""

from __future__ import annotations

import shutil
import time
from dataclasses import dataclass, field
from pathlib import Path

from create_discobase.errors import InstallError
from create_discobase.models import DependencyPlan
from create_discobase.utils import run_command


@dataclass
class InstallResult:
    """Structured result from a package install."""

    success: bool
    packages: list[str] = field(default_factory=list)
    command: list[str] = field(default_factory=list)
    stdout: str = ""
    duration_seconds: float = 0.0
    error: InstallError | None = None

    def manual_command(self) -> str:
        """The command the user can run by hand to retry the install."""
        return " ".join(self.command)


class Installer:
    """Hands a ``DependencyPlan`` to an external package manager."""

    def __init__(self, package_manager: str = "npm", timeout: int = 600) -> None:
        self.package_manager = package_manager
        self.timeout = timeout

    def build_command(self, packages: list[str]) -> list[str]:
        return [self.package_manager, "install", *packages]

    async def install(self, plan: DependencyPlan, cwd: str | Path) -> InstallResult:
        """Install every package in *plan* with *cwd* as working directory.

        No retry is attempted.
        """
        packages = plan.as_list()
        command = self.build_command(packages)
        start = time.monotonic()

        try:
            returncode, stdout, stderr = await self._run(command, cwd)
        except OSError as exc:
            error = InstallError(
                f"Could not start {self.package_manager}: {exc}", command
            )
            error.__cause__ = exc
            return InstallResult(
                success=False,
                packages=packages,
                command=command,
                duration_seconds=time.monotonic() - start,
                error=error,
            )

        duration = time.monotonic() - start
        if returncode != 0:
            message = stderr or f"{self.package_manager} exited with code {returncode}"
            return InstallResult(
                success=False,
                packages=packages,
                command=command,
                stdout=stdout,
                duration_seconds=duration,
                error=InstallError(message, command, returncode, stdout, stderr),
            )

        return InstallResult(
            success=True,
            packages=packages,
            command=command,
            stdout=stdout,
            duration_seconds=duration,
        )

    async def _run(self, command: list[str], cwd: str | Path) -> tuple[int, str, str]:
        # npm is a .cmd shim on Windows, so resolve the executable path first
        executable = shutil.which(command[0])
        if executable is None:
            raise FileNotFoundError(f"{command[0]} not found on PATH")
        return await run_command(
            [executable, *command[1:]], cwd=cwd, timeout=self.timeout
        )
