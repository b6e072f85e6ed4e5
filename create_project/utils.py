"""Shared utility functions for create-project.

Provides async command execution, file-system helpers used by the
generators, and Rich-based console reporting.  File writes run in a worker
thread so generators can stay fully async.
"""

from __future__ import annotations

import asyncio
import json
import os
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 600,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously.

    Args:
        cmd: Program and arguments.  No shell is involved.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A program that cannot be
        started yields return code ``127`` with the error in *stderr*.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    try:
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            cwd=str(cwd) if cwd else None,
            env=merged_env,
        )
    except (FileNotFoundError, PermissionError) as exc:
        return (127, "", f"Unable to run {cmd[0]}: {exc}")

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
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Returns:
        The resolved ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path.resolve()


def directory_is_empty(path: str | Path) -> bool:
    """Return ``True`` when *path* does not exist or has no entries."""
    dir_path = Path(path)
    if not dir_path.exists():
        return True
    if not dir_path.is_dir():
        return False
    return next(dir_path.iterdir(), None) is None


def read_text(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")


async def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path* as UTF-8, creating parent directories.

    The write is performed in a worker thread to avoid blocking the event
    loop.  Existing files are overwritten.
    """
    file_path = Path(path)
    await asyncio.to_thread(_write_file, file_path, content)
    return file_path


def to_json(data: dict[str, Any] | list[Any]) -> str:
    """Serialise *data* the way npm writes ``package.json`` (2-space indent, trailing newline)."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


async def write_json(path: str | Path, data: dict[str, Any] | list[Any]) -> Path:
    """Save data as pretty-printed JSON."""
    return await write_text(path, to_json(data))


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str, subtitle: str = "") -> None:
    """Print the boxed banner shown at the start of an interactive session."""
    body = f"[bold cyan]{title}[/bold cyan]"
    if subtitle:
        body += f"\n[dim]{subtitle}[/dim]"
    console.print(Panel(body, expand=False, border_style="cyan"))


def print_step(step: int, total: int, message: str) -> None:
    """Print a ``[step/total] message`` progress line."""
    console.print(f"[bold blue]\\[{step}/{total}][/bold blue] {message}")


def print_section(title: str) -> None:
    console.print()
    console.print(Rule(f"[bold]{title}[/bold]", style="dim"))


def print_info(message: str) -> None:
    """Print a dimmed informational message."""
    console.print(f"[dim]{message}[/dim]")


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_commands(commands: list[str]) -> None:
    """Print shell commands indented, one per line."""
    for command in commands:
        console.print(f"  [cyan]{command}[/cyan]")
