"""Astro static-site project generator."""

from __future__ import annotations

from ..models import AstroOptions, Framework
from .generator import WORKFLOWS_DIR, Artifact, ProjectGenerator
from .manifest import ManifestSpec
from .readme import ReadmeOptions, command_table, structure_section
from .snippets import render_favicon
from .sources import astro
from .workflows import WorkflowOptions, render_pages_deploy_workflow


class AstroGenerator(ProjectGenerator):
    """Content-focused static site with a shared layout and two pages.

    When CI is enabled the project also gets a GitHub Pages deploy workflow.
    """

    framework = Framework.ASTRO
    options: AstroOptions

    def directories(self) -> list[str]:
        return ["src/components", "src/layouts", "src/pages", "src/styles", "public"]

    def manifest_spec(self) -> ManifestSpec:
        packages = ManifestSpec(
            dependencies=["astro"],
            dev_dependencies=["@astrojs/check", "typescript"],
            scripts={
                "dev": "astro dev",
                "build": "astro build",
                "preview": "astro preview",
                "astro": "astro",
            },
        )
        if self.options.tailwind:
            packages.add(dependencies=["tailwindcss", "@tailwindcss/vite"])
        return packages

    def config_files(self) -> dict[str, Artifact]:
        return {
            "astro.config.mjs": astro.astro_config(self.options.tailwind),
            "tsconfig.json": astro.TSCONFIG,
            ".gitignore": self.gitignore(),
        }

    def workflow_options(self) -> WorkflowOptions:
        options = super().workflow_options()
        options.lint = False
        return options

    def workflow_files(self) -> dict[str, Artifact]:
        files = super().workflow_files()
        if files:
            files[f"{WORKFLOWS_DIR}/deploy.yml"] = render_pages_deploy_workflow(
                self.config.package_manager, self.settings.ci.node_version
            )
        return files

    def source_files(self) -> dict[str, Artifact]:
        tailwind = self.options.tailwind
        return {
            "src/styles/global.css": astro.global_css(tailwind),
            "src/layouts/BaseLayout.astro": astro.base_layout(self.name, tailwind),
            "src/components/Header.astro": astro.header(self.name, tailwind),
            "src/components/Footer.astro": astro.footer(self.name, tailwind),
            "src/pages/index.astro": astro.index_page(self.name, tailwind),
            "src/pages/about.astro": astro.about_page(self.name, tailwind),
            "public/favicon.svg": render_favicon(self.name),
        }

    def readme_options(self) -> ReadmeOptions:
        features = ["Astro 5", "TypeScript", "Zero JavaScript by default"]
        if self.options.tailwind:
            features.append("Tailwind CSS")
        if self.options.github_actions:
            features.append("GitHub Actions CI and GitHub Pages deployment")
        return ReadmeOptions(
            project_name=self.name,
            description="Static website built with Astro.",
            features=features,
            package_manager=self.config.package_manager,
            commands=command_table(Framework.ASTRO),
            sections=[structure_section(astro.structure_tree(self.name))],
            additional_content=astro.resources(self.options.tailwind),
        )
