"""Exception hierarchy for the project generator."""

from __future__ import annotations

from pathlib import Path


class SetupError(Exception):
    """Base class for every error raised by the generator."""


class InvalidNameError(SetupError):
    """Raised when a project name fails validation."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(reason)


class DestinationNotEmptyError(SetupError):
    """Raised when the target directory already holds entries."""

    def __init__(self, path: Path, project_name: str) -> None:
        self.path = path
        self.project_name = project_name
        super().__init__(f"Directory {project_name} already exists and is not empty!")


class UserCancelled(SetupError):
    """Raised when the user aborts at a prompt (Ctrl-C or end of input)."""

    def __init__(self) -> None:
        super().__init__("Setup cancelled")


class MaterializeError(SetupError):
    """Raised when project files cannot be created.

    The destination is left as-is: ``written`` lists every path created
    before the failure so the caller can report the partial state.
    """

    action = "write"

    def __init__(self, path: Path, written: list[Path] | None = None) -> None:
        self.path = path
        self.written = list(written or [])
        super().__init__(f"Failed to {self.action} {path}")


class CopyFailure(MaterializeError):
    """A template entry could not be copied into the destination."""

    action = "copy"


class WriteFailure(MaterializeError):
    """A generated file or directory could not be written."""

    action = "write"


class InstallError(SetupError):
    """Raised when the package manager exits unsuccessfully."""

    def __init__(
        self,
        message: str,
        command: list[str],
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(message)
