"""Next.js (App Router) project generator."""

from __future__ import annotations

from ..models import Framework, NextOptions
from .generator import Artifact, ProjectGenerator
from .manifest import ManifestSpec
from .readme import ReadmeOptions, command_table, structure_section
from .snippets import render_counter_store, render_favicon
from .sources import next as next_sources


class NextGenerator(ProjectGenerator):
    """Full-stack React project on the Next.js App Router."""

    framework = Framework.NEXT
    options: NextOptions

    def directories(self) -> list[str]:
        dirs = ["src/app", "src/components", "src/lib", "src/types", "public"]
        if self.options.zustand:
            dirs.append("src/store")
        return dirs

    def manifest_spec(self) -> ManifestSpec:
        # Next.js config files are loaded as CommonJS unless they say otherwise.
        packages = ManifestSpec(
            dependencies=["next", "react", "react-dom"],
            dev_dependencies=[
                "@types/node",
                "@types/react",
                "@types/react-dom",
                "typescript",
                "eslint",
                "eslint-config-next",
            ],
            scripts={
                "dev": "next dev",
                "build": "next build",
                "start": "next start",
                "lint": "next lint",
            },
            module=False,
        )
        if self.options.tailwind:
            packages.add(dev_dependencies=["tailwindcss", "@tailwindcss/postcss"])
        if self.options.zustand:
            packages.add(dependencies=["zustand"])
        return packages

    def config_files(self) -> dict[str, Artifact]:
        files: dict[str, Artifact] = {
            "next.config.ts": next_sources.NEXT_CONFIG,
            "tsconfig.json": next_sources.TSCONFIG,
            "next-env.d.ts": next_sources.NEXT_ENV,
        }
        if self.options.tailwind:
            files["postcss.config.mjs"] = next_sources.POSTCSS_CONFIG
        files[".gitignore"] = self.gitignore()
        return files

    def source_files(self) -> dict[str, Artifact]:
        opts = self.options
        files: dict[str, Artifact] = {
            "src/app/globals.css": next_sources.globals_css(opts.tailwind),
            "src/app/layout.tsx": next_sources.layout_tsx(self.name, opts.tailwind),
            "src/app/page.tsx": next_sources.page_tsx(self.name, opts.tailwind, opts.zustand),
        }
        if not opts.tailwind:
            files["src/app/page.module.css"] = next_sources.PAGE_MODULE_CSS
        if opts.zustand:
            files["src/store/counterStore.ts"] = render_counter_store()
        files["public/favicon.svg"] = render_favicon(self.name, color="#000000")
        return files

    def readme_options(self) -> ReadmeOptions:
        opts = self.options
        features = ["Next.js 15 (App Router)", "React 19", "TypeScript", "ESLint"]
        if opts.tailwind:
            features.append("Tailwind CSS")
        if opts.zustand:
            features.append("Zustand state management")
        if opts.github_actions:
            features.append("GitHub Actions CI")
        return ReadmeOptions(
            project_name=self.name,
            description="Full-stack React application built with Next.js.",
            features=features,
            package_manager=self.config.package_manager,
            commands=command_table(Framework.NEXT),
            sections=[
                structure_section(next_sources.structure_tree(self.name, opts.zustand))
            ],
        )
