"""Vite + React + TypeScript project generator."""

from __future__ import annotations

from ..models import Framework, ReactOptions
from .generator import Artifact, ProjectGenerator
from .manifest import ManifestSpec
from .readme import ReadmeOptions, command_table, structure_section
from .snippets import render_counter_store
from .sources import react


class ReactGenerator(ProjectGenerator):
    """Single-page application bundled with Vite.

    Optional pieces: Tailwind CSS (through the Vite plugin), React Router
    with two pages, and a Zustand store driving the counter demo.
    """

    framework = Framework.REACT
    options: ReactOptions

    def directories(self) -> list[str]:
        dirs = ["src/components", "src/hooks", "src/utils", "src/types", "public"]
        if self.options.react_router:
            dirs.append("src/pages")
        if self.options.zustand:
            dirs.append("src/store")
        return dirs

    def manifest_spec(self) -> ManifestSpec:
        packages = ManifestSpec(
            dependencies=["react", "react-dom"],
            dev_dependencies=[
                "@eslint/js",
                "@types/react",
                "@types/react-dom",
                "@vitejs/plugin-react",
                "eslint",
                "eslint-plugin-react-hooks",
                "eslint-plugin-react-refresh",
                "globals",
                "typescript",
                "typescript-eslint",
                "vite",
            ],
            scripts={
                "dev": "vite",
                "build": "tsc -b && vite build",
                "lint": "eslint .",
                "preview": "vite preview",
            },
        )
        if self.options.tailwind:
            packages.add(dev_dependencies=["tailwindcss", "@tailwindcss/vite"])
        if self.options.react_router:
            packages.add(dependencies=["react-router-dom"])
        if self.options.zustand:
            packages.add(dependencies=["zustand"])
        return packages

    def config_files(self) -> dict[str, Artifact]:
        return {
            "tsconfig.json": react.TSCONFIG,
            "vite.config.ts": react.vite_config(self.options.tailwind),
            "eslint.config.js": react.ESLINT_CONFIG,
            ".gitignore": self.gitignore(),
        }

    def source_files(self) -> dict[str, Artifact]:
        opts = self.options
        files: dict[str, Artifact] = {
            "index.html": react.index_html(self.name),
            "src/main.tsx": react.main_tsx(opts.react_router),
            "src/App.tsx": react.app_tsx(self.name, opts.react_router, opts.tailwind),
            "src/components/Counter.tsx": react.counter_tsx(opts.tailwind, opts.zustand),
            "src/index.css": react.index_css(opts.tailwind),
            "public/vite.svg": react.VITE_SVG,
        }
        if opts.react_router:
            files["src/pages/HomePage.tsx"] = react.home_page_tsx(self.name, opts.tailwind)
            files["src/pages/AboutPage.tsx"] = react.about_page_tsx(opts.tailwind)
        if opts.zustand:
            files["src/store/counterStore.ts"] = render_counter_store()
        return files

    def readme_options(self) -> ReadmeOptions:
        opts = self.options
        features = ["React 19", "TypeScript", "Vite", "ESLint"]
        if opts.tailwind:
            features.append("Tailwind CSS")
        if opts.react_router:
            features.append("React Router")
        if opts.zustand:
            features.append("Zustand state management")
        if opts.github_actions:
            features.append("GitHub Actions CI")
        return ReadmeOptions(
            project_name=self.name,
            description="React + TypeScript single-page application built with Vite.",
            features=features,
            package_manager=self.config.package_manager,
            commands=command_table(Framework.REACT),
            sections=[
                structure_section(
                    react.structure_tree(self.name, opts.react_router, opts.zustand)
                )
            ],
        )
