"""Unit tests for the external-tool helpers (create_project.shell).

Subprocesses are mocked; no package manager or git binary is required.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, call, patch

import pytest

from create_project.models import PackageManager
from create_project.shell import command_exists, init_git, install_dependencies

pytestmark = pytest.mark.unit


class TestCommandExists:
    def test_found(self):
        with patch("create_project.shell.shutil.which", return_value="/usr/bin/git"):
            assert command_exists("git") is True

    def test_missing(self):
        with patch("create_project.shell.shutil.which", return_value=None):
            assert command_exists("pnpm") is False


class TestInstallDependencies:
    @pytest.mark.parametrize("pm", ["npm", "pnpm", "yarn"])
    async def test_runs_package_manager_install(self, tmp_path: Path, pm: str):
        mock_run = AsyncMock(return_value=(0, "added 120 packages", ""))
        with patch("create_project.shell.command_exists", return_value=True), \
             patch("create_project.shell.run_command", mock_run):
            assert await install_dependencies(tmp_path, PackageManager(pm)) is True
        args, kwargs = mock_run.call_args
        assert args[0] == [pm, "install"]
        assert kwargs["cwd"] == tmp_path

    async def test_failure_returns_false(self, tmp_path: Path):
        mock_run = AsyncMock(return_value=(1, "", "npm ERR! code ERESOLVE"))
        with patch("create_project.shell.command_exists", return_value=True), \
             patch("create_project.shell.run_command", mock_run):
            assert await install_dependencies(tmp_path, PackageManager.NPM) is False

    async def test_missing_binary_returns_false_without_running(self, tmp_path: Path):
        mock_run = AsyncMock()
        with patch("create_project.shell.command_exists", return_value=False), \
             patch("create_project.shell.run_command", mock_run):
            assert await install_dependencies(tmp_path, PackageManager.PNPM) is False
        mock_run.assert_not_called()


class TestInitGit:
    async def test_runs_three_commands_in_order(self, tmp_path: Path):
        mock_run = AsyncMock(return_value=(0, "", ""))
        with patch("create_project.shell.command_exists", return_value=True), \
             patch("create_project.shell.run_command", mock_run):
            assert await init_git(tmp_path) is True
        commands = [c.args[0] for c in mock_run.call_args_list]
        assert commands == [
            ["git", "init"],
            ["git", "add", "."],
            ["git", "commit", "-m", "Initial commit"],
        ]

    async def test_stops_at_first_failure(self, tmp_path: Path):
        mock_run = AsyncMock(side_effect=[(0, "", ""), (0, "", ""), (128, "", "Author identity unknown")])
        with patch("create_project.shell.command_exists", return_value=True), \
             patch("create_project.shell.run_command", mock_run):
            assert await init_git(tmp_path) is False
        assert mock_run.await_count == 3

    async def test_init_failure_skips_rest(self, tmp_path: Path):
        mock_run = AsyncMock(return_value=(1, "", "fatal"))
        with patch("create_project.shell.command_exists", return_value=True), \
             patch("create_project.shell.run_command", mock_run):
            assert await init_git(tmp_path) is False
        mock_run.assert_awaited_once()
        assert mock_run.call_args == call(["git", "init"], cwd=tmp_path, timeout=60)

    async def test_git_missing(self, tmp_path: Path):
        with patch("create_project.shell.command_exists", return_value=False):
            assert await init_git(tmp_path) is False
