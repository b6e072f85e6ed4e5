"""End-to-end scaffolding scenarios.

These tests drive the real pipeline into ``tmp_path`` with registry lookups
disabled, then inspect the generated tree the way a user would.

No external tools (npm, git, Docker) are required.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest
import yaml

from create_project.config import Config, RegistryConfig
from create_project.models import ProjectConfiguration
from create_project.pipeline import ScaffoldPipeline, main


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _offline() -> Config:
    return Config(registry=RegistryConfig(offline=True))


def _manifest(root: Path) -> dict[str, Any]:
    return json.loads((root / "package.json").read_text(encoding="utf-8"))


def _tree(root: Path) -> set[str]:
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


@pytest.mark.integration
class TestExpressPostgresAuthDocker:
    """Express API with PostgreSQL, JWT auth and Docker."""

    @pytest.fixture
    async def project(self, tmp_path: Path) -> Path:
        config = ProjectConfiguration(
            name="my-api",
            framework="express",
            target_directory=tmp_path / "my-api",
            initialize_git=False,
            install_dependencies=False,
            options={
                "framework": "express",
                "database": "postgresql",
                "authentication": True,
                "docker": True,
            },
        )
        result = await ScaffoldPipeline(config, _offline()).run()
        return result.project_path

    async def test_files(self, project: Path):
        tree = _tree(project)
        for expected in (
            "package.json",
            "prisma/schema.prisma",
            "src/config/database.ts",
            "src/middlewares/auth.ts",
            "src/controllers/authController.ts",
            "src/controllers/userController.ts",
            "src/routes/authRoutes.ts",
            "src/routes/userRoutes.ts",
            "docker-compose.yml",
            "Dockerfile",
            ".dockerignore",
            ".env",
            "README.md",
        ):
            assert expected in tree, expected
        assert "src/models/User.ts" not in tree
        assert "src/config/swagger.ts" not in tree

    async def test_manifest(self, project: Path):
        manifest = _manifest(project)
        assert manifest["name"] == "my-api"
        assert {"@prisma/client", "bcrypt", "jsonwebtoken", "express"} <= set(manifest["dependencies"])
        assert "prisma" in manifest["devDependencies"]
        assert manifest["scripts"]["db:generate"] == "prisma generate"
        assert manifest["scripts"]["db:push"] == "prisma db push"
        assert manifest["scripts"]["db:migrate"] == "prisma migrate dev"
        assert manifest["scripts"]["db:studio"] == "prisma studio"
        assert "mongoose" not in manifest["dependencies"]

    async def test_auth_controller_uses_prisma(self, project: Path):
        controller = (project / "src" / "controllers" / "authController.ts").read_text(
            encoding="utf-8"
        )
        assert "from '@prisma/client'" in controller
        assert "'P2002'" in controller
        assert "new AppError(409, 'Email already registered')" in controller
        assert "../models" not in controller
        assert "mongoose" not in controller

    async def test_routes_index(self, project: Path):
        index = (project / "src" / "routes" / "index.ts").read_text(encoding="utf-8")
        assert "router.use('/health', healthRoutes);" in index
        assert "router.use('/auth', authRoutes);" in index
        assert "router.use('/users', userRoutes);" in index

    async def test_compose(self, project: Path):
        compose = yaml.safe_load((project / "docker-compose.yml").read_text(encoding="utf-8"))
        assert set(compose["services"]) == {"api", "postgres"}
        assert compose["services"]["postgres"]["image"] == "postgres:16-alpine"

    async def test_env(self, project: Path):
        env = (project / ".env").read_text(encoding="utf-8")
        assert "DATABASE_URL=" in env
        assert "JWT_SECRET=" in env
        assert "MONGODB_URI" not in env


@pytest.mark.integration
class TestReactWithoutRouterOrStore:
    """React with every optional feature off."""

    def test_minimal_react(self, tmp_path: Path):
        target = tmp_path / "my-app"
        main(["create", "my-app", "-f", "react", "-d", str(target), "-y", "--offline",
              "--no-git", "--no-install"])

        tree = _tree(target)
        assert "src/App.tsx" in tree
        assert not (target / "src" / "pages").exists()
        assert not (target / "src" / "store").exists()
        assert not (target / ".github").exists()

        app = (target / "src" / "App.tsx").read_text(encoding="utf-8")
        assert "react-router-dom" not in app
        assert "zustand" not in (target / "src" / "components" / "Counter.tsx").read_text(
            encoding="utf-8"
        )

        manifest = _manifest(target)
        assert set(manifest["dependencies"]) == {"react", "react-dom"}
        assert manifest["type"] == "module"


@pytest.mark.integration
class TestSkipInstallAndGit:
    """No install and no git: nothing is run and guidance includes the install step."""

    async def test_guidance(self, tmp_path: Path):
        config = ProjectConfiguration(
            name="docs",
            framework="astro",
            target_directory=tmp_path / "docs",
            package_manager="pnpm",
            initialize_git=False,
            install_dependencies=False,
        )
        mock_run = AsyncMock(return_value=(0, "", ""))
        with patch("create_project.shell.run_command", mock_run):
            result = await ScaffoldPipeline(config, _offline()).run()

        mock_run.assert_not_called()
        assert not (result.project_path / ".git").exists()
        assert not (result.project_path / "node_modules").exists()
        assert result.next_steps == [f"cd {tmp_path / 'docs'}", "pnpm install", "pnpm run dev"]


@pytest.mark.integration
class TestEveryFramework:
    @pytest.mark.parametrize("framework", ["react", "astro", "next", "express"])
    async def test_defaults_generate_valid_json(self, tmp_path: Path, framework: str):
        config = ProjectConfiguration(
            name=f"{framework}-app",
            framework=framework,
            target_directory=tmp_path / framework,
            initialize_git=False,
            install_dependencies=False,
        )
        result = await ScaffoldPipeline(config, _offline()).run()
        for path in result.project_path.rglob("*.json"):
            json.loads(path.read_text(encoding="utf-8"))
        manifest = _manifest(result.project_path)
        assert manifest["name"] == f"{framework}-app"
        assert {"dev", "build"} <= set(manifest["scripts"])
        assert (result.project_path / "README.md").is_file()
        assert (result.project_path / ".gitignore").is_file()
