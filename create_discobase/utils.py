"""Shared utility functions for create-discobase.

Provides async command execution, duration formatting and the Rich console
helpers used by the reporter.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from rich.console import Console

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 120,
) -> tuple[int, str, str]:
    """Run a command asynchronously, capturing its output.

    Args:
        cmd: Executable followed by its arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  On timeout the return code
        is ``-1`` and stderr describes the timeout.

    Raises:
        FileNotFoundError: If the executable does not exist.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        cwd=str(cwd) if cwd else None,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str, out: Console | None = None) -> None:
    """Print a green success message."""
    (out or console).print(f"[bold green]{message}[/bold green]")


def print_error(message: str, out: Console | None = None) -> None:
    """Print a red error message."""
    (out or console).print(f"[bold red]{message}[/bold red]")


def print_warning(message: str, out: Console | None = None) -> None:
    """Print a yellow warning message."""
    (out or console).print(f"[bold yellow]{message}[/bold yellow]")
