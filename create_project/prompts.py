"""Interactive collection of a ``ProjectConfiguration``.

Values already supplied on the command line are never asked again.  With
``assume_defaults`` nothing is asked at all and every missing value takes
its default, which makes the CLI scriptable.  ``KeyboardInterrupt`` and
``EOFError`` raised by the prompts propagate to the caller, which treats
them as a user cancellation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel
from rich.prompt import Confirm, Prompt

from .models import (
    FRAMEWORK_LABELS,
    AstroOptions,
    Database,
    ExpressOptions,
    Framework,
    NextOptions,
    PackageManager,
    ProjectConfiguration,
    ReactOptions,
    check_project_name,
    project_name_error,
)
from .utils import console, print_error


class CliAnswers(BaseModel):
    """Values taken from command-line flags; ``None`` means "ask"."""

    name: Optional[str] = None
    framework: Optional[Framework] = None
    directory: Optional[Path] = None
    package_manager: Optional[PackageManager] = None
    initialize_git: Optional[bool] = None
    install_dependencies: Optional[bool] = None
    assume_defaults: bool = False


def ask_project_name() -> str:
    while True:
        name = Prompt.ask("[bold]Project name[/bold]", console=console, default="my-app")
        reason = project_name_error(name)
        if reason is None:
            return name
        print_error(reason)


def ask_choice(question: str, choices: list[str], default: str) -> str:
    return Prompt.ask(
        f"[bold]{question}[/bold]",
        console=console,
        choices=choices,
        default=default,
    )


def ask_confirm(question: str, default: bool = False) -> bool:
    return Confirm.ask(f"[bold]{question}[/bold]", console=console, default=default)


def ask_framework() -> Framework:
    for framework, label in FRAMEWORK_LABELS.items():
        console.print(f"  [cyan]{framework.value:<8}[/cyan] {label}")
    return Framework(ask_choice("Framework", [f.value for f in Framework], Framework.REACT.value))


def ask_react_options() -> ReactOptions:
    return ReactOptions(
        tailwind=ask_confirm("Add Tailwind CSS?"),
        react_router=ask_confirm("Add React Router?"),
        zustand=ask_confirm("Add Zustand for state management?"),
        github_actions=ask_confirm("Add a GitHub Actions CI workflow?"),
    )


def ask_astro_options() -> AstroOptions:
    return AstroOptions(
        tailwind=ask_confirm("Add Tailwind CSS?"),
        github_actions=ask_confirm("Add GitHub Actions (CI + GitHub Pages deploy)?"),
    )


def ask_next_options() -> NextOptions:
    return NextOptions(
        tailwind=ask_confirm("Add Tailwind CSS?"),
        zustand=ask_confirm("Add Zustand for state management?"),
        github_actions=ask_confirm("Add a GitHub Actions CI workflow?"),
    )


def ask_express_options() -> ExpressOptions:
    database = Database(
        ask_choice("Database", [d.value for d in Database], Database.NONE.value)
    )
    # Authentication stores users, so it is only offered with a database.
    authentication = False
    if database is not Database.NONE:
        authentication = ask_confirm("Add JWT authentication?")
    return ExpressOptions(
        database=database,
        authentication=authentication,
        swagger=ask_confirm("Add Swagger API documentation?"),
        docker=ask_confirm("Add Docker and docker-compose?"),
        github_actions=ask_confirm("Add a GitHub Actions CI workflow?"),
    )


_OPTION_PROMPTS = {
    Framework.REACT: ask_react_options,
    Framework.ASTRO: ask_astro_options,
    Framework.NEXT: ask_next_options,
    Framework.EXPRESS: ask_express_options,
}


def collect_configuration(
    answers: CliAnswers, default_package_manager: PackageManager = PackageManager.NPM
) -> ProjectConfiguration:
    """Fill every value missing from *answers* and build the configuration.

    Raises:
        InvalidProjectNameError: If a name given on the command line is
            invalid, or no name was given together with ``assume_defaults``.
        KeyboardInterrupt, EOFError: If the user aborts a prompt.
    """
    interactive = not answers.assume_defaults

    if answers.name is not None:
        name = check_project_name(answers.name)
    elif interactive:
        name = ask_project_name()
    else:
        name = check_project_name("")

    framework = answers.framework
    if framework is None:
        framework = ask_framework() if interactive else Framework.REACT

    package_manager = answers.package_manager
    if package_manager is None:
        package_manager = (
            PackageManager(
                ask_choice(
                    "Package manager",
                    [pm.value for pm in PackageManager],
                    PackageManager(default_package_manager).value,
                )
            )
            if interactive
            else default_package_manager
        )

    options = _OPTION_PROMPTS[framework]() if interactive else None

    initialize_git = answers.initialize_git
    if initialize_git is None:
        initialize_git = ask_confirm("Initialise a git repository?", True) if interactive else True

    install_dependencies = answers.install_dependencies
    if install_dependencies is None:
        install_dependencies = (
            ask_confirm("Install dependencies now?", True) if interactive else True
        )

    return ProjectConfiguration(
        name=name,
        framework=framework,
        target_directory=answers.directory,
        package_manager=package_manager,
        initialize_git=initialize_git,
        install_dependencies=install_dependencies,
        options=options,
    )
