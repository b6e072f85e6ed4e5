"""Unit tests for utility functions (create_project.utils).

Tests cover:
- run_command (success, failure, missing program, timeout, env vars)
- ensure_dir / directory_is_empty
- write_text / write_json / read_text / to_json
- Rich output helpers
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from create_project.utils import (
    directory_is_empty,
    ensure_dir,
    print_banner,
    print_commands,
    print_error,
    print_step,
    print_success,
    print_warning,
    read_text,
    run_command,
    to_json,
    write_json,
    write_text,
)


# ---------------------------------------------------------------------------
# run_command
# ---------------------------------------------------------------------------


class TestRunCommand:
    @pytest.mark.unit
    async def test_successful_command(self):
        returncode, stdout, stderr = await run_command(["echo", "hello"])
        assert returncode == 0
        assert stdout == "hello"
        assert stderr == ""

    @pytest.mark.unit
    async def test_failing_command(self):
        returncode, _, _ = await run_command(["false"])
        assert returncode != 0

    @pytest.mark.unit
    async def test_missing_program(self):
        returncode, stdout, stderr = await run_command(["definitely-not-a-real-binary-xyz"])
        assert returncode == 127
        assert stdout == ""
        assert "definitely-not-a-real-binary-xyz" in stderr

    @pytest.mark.unit
    async def test_timeout(self):
        returncode, _, stderr = await run_command(["sleep", "5"], timeout=1)
        assert returncode == -1
        assert "timed out" in stderr

    @pytest.mark.unit
    async def test_cwd(self, tmp_path: Path):
        returncode, stdout, _ = await run_command(["pwd"], cwd=tmp_path)
        assert returncode == 0
        assert Path(stdout).resolve() == tmp_path.resolve()

    @pytest.mark.unit
    async def test_env_merged(self):
        returncode, stdout, _ = await run_command(
            ["sh", "-c", "echo $CREATE_PROJECT_TEST_VAR"],
            env={"CREATE_PROJECT_TEST_VAR": "scaffold"},
        )
        assert returncode == 0
        assert stdout == "scaffold"


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


class TestDirectories:
    @pytest.mark.unit
    def test_ensure_dir_creates_parents(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "c"
        result = ensure_dir(target)
        assert target.is_dir()
        assert result == target.resolve()

    @pytest.mark.unit
    def test_ensure_dir_existing(self, tmp_path: Path):
        assert ensure_dir(tmp_path) == tmp_path.resolve()

    @pytest.mark.unit
    def test_missing_directory_is_empty(self, tmp_path: Path):
        assert directory_is_empty(tmp_path / "nope") is True

    @pytest.mark.unit
    def test_empty_directory(self, tmp_path: Path):
        assert directory_is_empty(tmp_path) is True

    @pytest.mark.unit
    def test_directory_with_file(self, tmp_path: Path):
        (tmp_path / "file.txt").write_text("x", encoding="utf-8")
        assert directory_is_empty(tmp_path) is False

    @pytest.mark.unit
    def test_directory_with_hidden_file(self, tmp_path: Path):
        (tmp_path / ".git").mkdir()
        assert directory_is_empty(tmp_path) is False

    @pytest.mark.unit
    def test_file_is_not_an_empty_directory(self, tmp_path: Path):
        path = tmp_path / "file.txt"
        path.write_text("x", encoding="utf-8")
        assert directory_is_empty(path) is False


class TestFileWrites:
    @pytest.mark.unit
    async def test_write_text_creates_parents(self, tmp_path: Path):
        path = await write_text(tmp_path / "src" / "app" / "page.tsx", "export {};\n")
        assert path.read_text(encoding="utf-8") == "export {};\n"

    @pytest.mark.unit
    async def test_write_text_overwrites(self, tmp_path: Path):
        path = tmp_path / "README.md"
        await write_text(path, "first")
        await write_text(path, "second")
        assert path.read_text(encoding="utf-8") == "second"

    @pytest.mark.unit
    def test_to_json_format(self):
        text = to_json({"name": "my-app", "private": True})
        assert text == '{\n  "name": "my-app",\n  "private": true\n}\n'

    @pytest.mark.unit
    def test_to_json_keeps_unicode(self):
        assert "é" in to_json({"description": "café"})

    @pytest.mark.unit
    async def test_write_json(self, tmp_path: Path):
        path = await write_json(tmp_path / "package.json", {"name": "my-app", "scripts": {}})
        text = path.read_text(encoding="utf-8")
        assert text.endswith("}\n")
        assert json.loads(text) == {"name": "my-app", "scripts": {}}

    @pytest.mark.unit
    async def test_read_text_returns_written_content(self, tmp_path: Path):
        path = await write_text(tmp_path / "src" / "café.ts", "export const name = 'café';\n")
        assert read_text(path) == "export const name = 'café';\n"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    @pytest.mark.unit
    def test_print_step(self):
        with patch("create_project.utils.console") as mock_console:
            print_step(2, 5, "Resolving dependency versions")
        text = mock_console.print.call_args[0][0]
        assert "2/5" in text
        assert "Resolving dependency versions" in text

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "helper,colour",
        [(print_success, "green"), (print_error, "red"), (print_warning, "yellow")],
    )
    def test_coloured_messages(self, helper, colour):
        with patch("create_project.utils.console") as mock_console:
            helper("message")
        text = mock_console.print.call_args[0][0]
        assert colour in text
        assert "message" in text

    @pytest.mark.unit
    def test_print_commands(self):
        with patch("create_project.utils.console") as mock_console:
            print_commands(["cd my-app", "npm run dev"])
        assert mock_console.print.call_count == 2
        assert "npm run dev" in mock_console.print.call_args_list[1][0][0]

    @pytest.mark.unit
    def test_print_banner(self):
        with patch("create_project.utils.console") as mock_console:
            print_banner("create-project", "subtitle")
        mock_console.print.assert_called_once()
