"""``README.md`` generation.

Every generated README shares one layout: title and description, a
*Features* list, framework-supplied sections (project structure, setup,
endpoints...), the *Available commands* block and optional trailing
content.  The package manager only changes how commands are invoked.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..models import Framework, PackageManager
from .templates import render


class ReadmeSection(BaseModel):
    title: str
    body: str


class ReadmeCommand(BaseModel):
    """A package-manager invocation, e.g. ``run dev``, with its description."""

    name: str
    description: str


class ReadmeOptions(BaseModel):
    project_name: str
    description: str
    features: list[str]
    package_manager: PackageManager = PackageManager.NPM
    commands: list[ReadmeCommand]
    sections: list[ReadmeSection] = Field(default_factory=list)
    additional_content: str = ""


_DEV = ReadmeCommand(name="run dev", description="Start the development server")
_BUILD = ReadmeCommand(name="run build", description="Build for production")
_PREVIEW = ReadmeCommand(name="run preview", description="Preview the production build")
_LINT = ReadmeCommand(name="run lint", description="Lint the source code")

COMMAND_TABLES: dict[Framework, list[ReadmeCommand]] = {
    Framework.REACT: [_DEV, _BUILD, _PREVIEW, _LINT],
    Framework.NEXT: [
        _DEV,
        _BUILD,
        ReadmeCommand(name="start", description="Start the production server"),
        _LINT,
    ],
    Framework.ASTRO: [_DEV, _BUILD, _PREVIEW],
    Framework.EXPRESS: [
        ReadmeCommand(name="run dev", description="Start the server with hot reload"),
        ReadmeCommand(name="run build", description="Compile TypeScript to dist/"),
        ReadmeCommand(name="start", description="Start the compiled server"),
        _LINT,
    ],
}

DATABASE_COMMANDS: list[ReadmeCommand] = [
    ReadmeCommand(name="run db:generate", description="Generate the Prisma client"),
    ReadmeCommand(name="run db:push", description="Push the schema to the database"),
    ReadmeCommand(name="run db:migrate", description="Create and apply a migration"),
    ReadmeCommand(name="run db:studio", description="Open Prisma Studio"),
]


def command_table(framework: Framework, include_database: bool = False) -> list[ReadmeCommand]:
    """Return the commands documented for *framework*.

    ``include_database`` appends the Prisma lifecycle commands; it only
    applies to the Express server.
    """
    commands = list(COMMAND_TABLES[Framework(framework)])
    if include_database and framework == Framework.EXPRESS:
        commands.extend(DATABASE_COMMANDS)
    return commands


_README = """\
# {{ project_name }}

{{ description }}

## Features

{% for feature in features %}
- {{ feature }}
{% endfor %}
{% for section in sections %}

## {{ section.title }}

{{ section.body.rstrip() }}
{% endfor %}

## Available commands

```bash
{% for command in commands %}
{% if not loop.first %}

{% endif %}
# {{ command.description }}
{{ package_manager }} {{ command.name }}
{% endfor %}
```
{% if additional_content %}

{{ additional_content.rstrip() }}
{% endif %}
"""


def render_readme(options: ReadmeOptions) -> str:
    return render(
        _README,
        project_name=options.project_name,
        description=options.description,
        features=options.features,
        sections=options.sections,
        commands=options.commands,
        package_manager=PackageManager(options.package_manager).value,
        additional_content=options.additional_content,
    )


def structure_section(tree: str) -> ReadmeSection:
    """Wrap a directory tree drawing in a *Project structure* section."""
    return ReadmeSection(title="Project structure", body=f"```\n{tree.rstrip()}\n```")
