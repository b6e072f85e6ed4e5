"""create-project command-line orchestrator.

Runs the three stages of a ``create`` invocation in order:

1. GENERATE -- write the project tree for the chosen framework.
2. INSTALL  -- run ``<pm> install`` (optional).
3. GIT      -- ``git init`` and an initial commit (optional).

Failures of the optional stages are reported as warnings; the generated
project is still usable, and the closing guidance tells the user what is
left to do by hand.

Usage::

    create-project create my-app --framework react
    python -m create_project create my-api -f express --no-install
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from . import __version__
from .config import Config
from .models import Framework, PackageManager, ProjectConfiguration, ScaffoldError
from .prompts import CliAnswers, collect_configuration
from .registry import VersionResolver
from .scaffolder import generate_project
from .shell import init_git, install_dependencies
from .utils import (
    console,
    directory_is_empty,
    print_banner,
    print_commands,
    print_error,
    print_section,
    print_success,
    print_warning,
    read_text,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class TargetDirectoryNotEmptyError(ScaffoldError):
    """Raised when the target directory already contains files."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Directory {path} already exists and is not empty")


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class ScaffoldResult(BaseModel):
    project_path: Path
    dependencies_installed: Optional[bool] = Field(
        default=None, description="None when installation was not requested"
    )
    git_initialized: Optional[bool] = Field(
        default=None, description="None when git was not requested"
    )
    next_steps: list[str] = Field(default_factory=list)


def next_steps(
    config: ProjectConfiguration,
    installed: Optional[bool],
    scripts: Optional[list[str]] = None,
) -> list[str]:
    """Commands the user still has to run to start the dev server.

    *scripts* are the script names of the written ``package.json``; without
    them the ``dev`` script is assumed.
    """
    pm = config.package_manager.value
    steps = [f"cd {config.target_directory}"]
    if not installed:
        steps.append(f"{pm} install")
    if scripts is None or "dev" in scripts:
        steps.append(f"{pm} run dev")
    elif "start" in scripts:
        steps.append(f"{pm} start")
    return steps


def manifest_scripts(project_path: Path) -> list[str]:
    """Script names declared by the generated ``package.json``."""
    manifest = json.loads(read_text(project_path / "package.json"))
    return list(manifest.get("scripts", {}))


class ScaffoldPipeline:
    """Drives one project creation from configuration to closing guidance.

    Attributes:
        config: The project to create.
        settings: Tool-level settings (registry, CI defaults).
        resolver: Version resolver shared by the generator.
    """

    def __init__(
        self,
        config: ProjectConfiguration,
        settings: Config | None = None,
        resolver: VersionResolver | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or Config()
        self.resolver = resolver or VersionResolver.from_config(self.settings.registry)

    def _preflight(self) -> None:
        target = self.config.project_path
        if not directory_is_empty(target):
            raise TargetDirectoryNotEmptyError(target)

    async def run(self) -> ScaffoldResult:
        """Create the project.

        Raises:
            TargetDirectoryNotEmptyError: Before anything is written.
            OSError: If generation fails part-way; written files remain.
        """
        self._preflight()

        print_section(f"Creating {self.config.name}")
        project_path = await generate_project(self.config, self.resolver, self.settings)
        print_success(f"Project created in {project_path}")

        installed: Optional[bool] = None
        if self.config.install_dependencies:
            print_section("Installing dependencies")
            installed = await install_dependencies(project_path, self.config.package_manager)
            if installed:
                print_success("Dependencies installed")
            else:
                print_warning(
                    f"Dependency installation failed; run '{self.config.package_manager.value} "
                    "install' manually"
                )

        git_ok: Optional[bool] = None
        if self.config.initialize_git:
            git_ok = await init_git(project_path)
            if git_ok:
                print_success("Git repository initialised")
            else:
                print_warning("Git initialisation failed; the project was still created")

        steps = next_steps(self.config, installed, manifest_scripts(project_path))
        console.print()
        console.print("[bold]Next steps:[/bold]")
        print_commands(steps)
        console.print()

        return ScaffoldResult(
            project_path=project_path,
            dependencies_installed=installed,
            git_initialized=git_ok,
            next_steps=steps,
        )


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-project",
        description="Scaffold React, Astro, Next.js and Express projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-project create my-app --framework react\n"
            "  create-project create my-api -f express -d ./api --no-git\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    create = subparsers.add_parser("create", help="Create a new project")
    create.add_argument("name", nargs="?", help="Project name (npm package name)")
    create.add_argument(
        "--framework", "-f",
        choices=[f.value for f in Framework],
        help="Target framework (asked interactively if omitted)",
    )
    create.add_argument(
        "--directory", "-d",
        type=Path,
        help="Target directory (default: ./<name>)",
    )
    create.add_argument(
        "--package-manager", "-p",
        choices=[pm.value for pm in PackageManager],
        help="Package manager (asked interactively if omitted)",
    )
    create.add_argument("--no-git", action="store_true", help="Skip git initialisation")
    create.add_argument("--no-install", action="store_true", help="Skip dependency installation")
    create.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Do not prompt; use defaults for everything not given",
    )
    create.add_argument(
        "--offline",
        action="store_true",
        help="Do not query the npm registry; use bundled versions",
    )
    return parser


def answers_from_args(args: argparse.Namespace) -> CliAnswers:
    return CliAnswers(
        name=args.name,
        framework=args.framework,
        directory=args.directory,
        package_manager=args.package_manager,
        initialize_git=False if args.no_git else None,
        install_dependencies=False if args.no_install else None,
        assume_defaults=args.yes,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``create-project``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.yes:
        print_banner("create-project", "Scaffold a new React, Astro, Next.js or Express project")

    try:
        settings = Config.from_env()
        if args.offline:
            settings.registry.offline = True
        config = collect_configuration(answers_from_args(args), settings.default_package_manager)
        result = asyncio.run(ScaffoldPipeline(config, settings).run())
    except (KeyboardInterrupt, EOFError):
        console.print()
        print_warning("Operation cancelled")
        sys.exit(0)
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)
    except ValidationError as exc:
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"])
            print_error(f"Error: {field}: {error['msg']}" if field else f"Error: {error['msg']}")
        sys.exit(1)
    except ValueError as exc:
        print_error(f"Error: invalid setting: {exc}")
        sys.exit(1)
    except OSError as exc:
        print_error(f"Error: could not write the project: {exc}")
        sys.exit(1)

    print_success(f"Done! {config.name} is ready at {result.project_path}")


if __name__ == "__main__":
    main()
