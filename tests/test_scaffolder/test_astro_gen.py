"""Tests for the Astro generator."""

from __future__ import annotations

import json
from typing import Callable

import pytest
import yaml

from create_project.models import ProjectConfiguration
from create_project.registry import VersionResolver
from create_project.scaffolder.astro_gen import AstroGenerator
from create_project.scaffolder.generator import WORKFLOWS_DIR

pytestmark = pytest.mark.unit

BASE_FILES = {
    "astro.config.mjs",
    "tsconfig.json",
    ".gitignore",
    "src/styles/global.css",
    "src/layouts/BaseLayout.astro",
    "src/components/Header.astro",
    "src/components/Footer.astro",
    "src/pages/index.astro",
    "src/pages/about.astro",
    "public/favicon.svg",
    "README.md",
}


@pytest.fixture
def astro(
    make_config: Callable[..., ProjectConfiguration], offline_resolver: VersionResolver
) -> Callable[..., AstroGenerator]:
    def _make(**options) -> AstroGenerator:
        return AstroGenerator(make_config("astro", name="my-site", **options), offline_resolver)

    return _make


class TestFiles:
    @pytest.mark.parametrize("tailwind", [False, True])
    def test_without_ci(self, astro, tailwind: bool):
        assert set(astro(tailwind=tailwind).files()) == BASE_FILES

    def test_ci_adds_both_workflows(self, astro):
        files = set(astro(github_actions=True).files())
        assert files == BASE_FILES | {f"{WORKFLOWS_DIR}/ci.yml", f"{WORKFLOWS_DIR}/deploy.yml"}

    def test_ci_workflow_has_no_lint(self, astro):
        ci = yaml.safe_load(astro(github_actions=True).files()[f"{WORKFLOWS_DIR}/ci.yml"])
        names = [step["name"] for step in ci["jobs"]["build"]["steps"]]
        assert "Lint" not in names
        assert "Build" in names

    def test_deploy_workflow_uses_package_manager(self, make_config, offline_resolver):
        gen = AstroGenerator(
            make_config("astro", package_manager="pnpm", github_actions=True), offline_resolver
        )
        deploy = gen.files()[f"{WORKFLOWS_DIR}/deploy.yml"]
        assert "pnpm/action-setup@v4" in deploy
        assert "run: pnpm build" in deploy


class TestManifestSpec:
    def test_default(self, astro):
        packages = astro().manifest_spec()
        assert packages.dependencies == ["astro"]
        assert set(packages.scripts) == {"dev", "build", "preview", "astro"}

    def test_tailwind(self, astro):
        packages = astro(tailwind=True).manifest_spec()
        assert packages.dependencies == ["astro", "tailwindcss", "@tailwindcss/vite"]


class TestSources:
    def test_plain_css(self, astro):
        files = astro().files()
        assert "tailwindcss" not in files["astro.config.mjs"]
        assert files["src/styles/global.css"].startswith(":root {")

    def test_tailwind(self, astro):
        files = astro(tailwind=True).files()
        assert "import tailwindcss from '@tailwindcss/vite';" in files["astro.config.mjs"]
        assert files["src/styles/global.css"] == '@import "tailwindcss";\n'

    def test_layout_imports_global_styles(self, astro):
        layout = astro().files()["src/layouts/BaseLayout.astro"]
        assert "import '../styles/global.css';" in layout
        assert "My Site, built with Astro" in layout

    def test_favicon_initial(self, astro):
        assert ">M</text>" in astro().files()["public/favicon.svg"]

    def test_readme_resources(self, astro):
        readme = astro(tailwind=True).files()["README.md"]
        assert "## Learn more" in readme
        assert "Tailwind CSS documentation" in readme
        assert readme.index("## Available commands") < readme.index("## Learn more")


class TestGenerate:
    async def test_generate(self, astro):
        gen = astro(github_actions=True)
        root = await gen.generate()
        assert (root / ".github" / "workflows" / "deploy.yml").is_file()
        manifest = json.loads((root / "package.json").read_text(encoding="utf-8"))
        assert manifest["name"] == "my-site"
        assert manifest["scripts"]["build"] == "astro build"
        assert manifest["type"] == "module"
