"""Shared scaffolding engine.

``ProjectGenerator`` runs the five generation phases in a fixed order
(directory structure, ``package.json``, configuration files, source files,
README).  Framework subclasses only describe *what* each phase produces
through pure methods; this class performs all filesystem and network I/O.
Keeping the content pure means every flag combination can be inspected
without touching the disk.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar, Union

from ..config import Config
from ..models import Framework, ProjectConfiguration
from ..registry import VersionResolver
from ..utils import ensure_dir, print_info, print_step, to_json, write_text
from .gitignore import gitignore_for
from .manifest import ManifestSpec, build_manifest
from .readme import ReadmeOptions, render_readme
from .workflows import WorkflowOptions, render_ci_workflow

Artifact = Union[str, dict[str, Any]]

WORKFLOWS_DIR = ".github/workflows"


class ProjectGenerator(ABC):
    """Base class for the per-framework generators.

    Subclasses set ``framework`` and implement ``directories``,
    ``manifest_spec``, ``config_files``, ``source_files`` and
    ``readme_options``.
    """

    framework: ClassVar[Framework]
    total_steps: ClassVar[int] = 5

    def __init__(
        self,
        config: ProjectConfiguration,
        resolver: VersionResolver | None = None,
        settings: Config | None = None,
    ) -> None:
        if config.framework != self.framework:
            raise ValueError(
                f"{type(self).__name__} cannot generate a {config.framework.value} project"
            )
        self.config = config
        self.options = config.options
        self.settings = settings or Config()
        self.resolver = resolver or VersionResolver.from_config(self.settings.registry)
        self.root = config.project_path
        self.written: list[str] = []
        self.manifest: dict[str, Any] | None = None

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def package_manager(self) -> str:
        return self.config.package_manager.value

    # -- Public API --------------------------------------------------------

    async def generate(self) -> Path:
        """Generate the complete project under ``config.target_directory``.

        Returns:
            Path to the generated project root.

        Raises:
            OSError: If a directory or file cannot be written.  Files written
                before the failure are left in place.
        """
        await asyncio.to_thread(self.root.mkdir, parents=True, exist_ok=True)

        # 1. Directory skeleton
        print_step(1, self.total_steps, "Creating directory structure")
        await self._create_directory_structure()

        # 2. package.json (versions resolved before any source is written)
        print_step(2, self.total_steps, "Resolving dependency versions")
        await self._write_manifest()

        # 3. Tooling and CI configuration
        print_step(3, self.total_steps, "Writing configuration files")
        await self._write_all(self.config_files())
        await self._write_all(self.workflow_files())

        # 4. Application source
        print_step(4, self.total_steps, "Writing source files")
        await self._write_all(self.source_files())

        # 5. Documentation
        print_step(5, self.total_steps, "Writing README")
        await self._write("README.md", self.readme())

        return self.root

    def files(self) -> dict[str, Artifact]:
        """Every file except ``package.json``, keyed by relative path, in write order."""
        combined: dict[str, Artifact] = {}
        for group in (
            self.config_files(),
            self.workflow_files(),
            self.source_files(),
            {"README.md": self.readme()},
        ):
            for path, content in group.items():
                if path in combined:
                    raise RuntimeError(f"{path} is produced by more than one phase")
                combined[path] = content
        return combined

    # -- Phase content (pure) ----------------------------------------------

    @abstractmethod
    def directories(self) -> list[str]:
        """Relative directories to create, including ones that stay empty."""

    @abstractmethod
    def manifest_spec(self) -> ManifestSpec:
        ...

    @abstractmethod
    def config_files(self) -> dict[str, Artifact]:
        ...

    @abstractmethod
    def source_files(self) -> dict[str, Artifact]:
        ...

    @abstractmethod
    def readme_options(self) -> ReadmeOptions:
        ...

    def readme(self) -> str:
        return render_readme(self.readme_options())

    def gitignore(self) -> str:
        return gitignore_for(self.framework)

    def workflow_options(self) -> WorkflowOptions:
        return WorkflowOptions(
            package_manager=self.config.package_manager,
            node_version=self.settings.ci.node_version,
        )

    def workflow_files(self) -> dict[str, Artifact]:
        if not self.options.github_actions:
            return {}
        return {f"{WORKFLOWS_DIR}/ci.yml": render_ci_workflow(self.workflow_options())}

    # -- I/O ---------------------------------------------------------------

    async def _create_directory_structure(self) -> None:
        directories = list(self.directories())
        if self.options.github_actions:
            directories.append(WORKFLOWS_DIR)
        await asyncio.gather(
            *(asyncio.to_thread(ensure_dir, self.root / d) for d in directories)
        )

    async def _write_manifest(self) -> None:
        self.manifest, resolved = await build_manifest(
            self.name, self.manifest_spec(), self.resolver
        )
        if not resolved.from_network:
            print_info("Registry unreachable, using bundled dependency versions")
        await self._write("package.json", self.manifest)

    async def _write_all(self, files: dict[str, Artifact]) -> None:
        for relative, content in files.items():
            await self._write(relative, content)

    async def _write(self, relative: str, content: Artifact) -> Path:
        if relative in self.written:
            raise RuntimeError(f"{relative} was already written in this run")
        text = content if isinstance(content, str) else to_json(content)
        path = await write_text(self.root / relative, text)
        self.written.append(relative)
        return path
