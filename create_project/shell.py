"""External tools a generated project is handed to after generation.

Both operations report failure through their return value instead of
raising: a missing ``pnpm`` binary or a failing ``git commit`` must not undo
a successfully generated project.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from .models import PackageManager
from .utils import print_info, print_warning, run_command

INSTALL_TIMEOUT = 900
GIT_TIMEOUT = 60


def command_exists(command: str) -> bool:
    """Return ``True`` if *command* is on ``PATH``."""
    return shutil.which(command) is not None


async def install_dependencies(project_dir: Path, package_manager: PackageManager) -> bool:
    """Run ``<pm> install`` inside *project_dir*."""
    pm = PackageManager(package_manager).value
    if not command_exists(pm):
        print_warning(f"{pm} was not found on PATH")
        return False

    rc, _stdout, stderr = await run_command(
        [pm, "install"], cwd=project_dir, timeout=INSTALL_TIMEOUT
    )
    if rc != 0:
        if stderr:
            print_info(stderr.splitlines()[-1])
        return False
    return True


async def init_git(project_dir: Path) -> bool:
    """Initialise a repository and record everything as the first commit."""
    if not command_exists("git"):
        print_warning("git was not found on PATH")
        return False

    steps = (
        ["git", "init"],
        ["git", "add", "."],
        ["git", "commit", "-m", "Initial commit"],
    )
    for cmd in steps:
        rc, _stdout, stderr = await run_command(cmd, cwd=project_dir, timeout=GIT_TIMEOUT)
        if rc != 0:
            if stderr:
                print_info(stderr.splitlines()[-1])
            return False
    return True
