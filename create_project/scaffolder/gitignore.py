"""``.gitignore`` generation.

The file always has the same four sections in the same order, followed by
an optional framework-specific section.  Frameworks only contribute entries;
they never reorder or drop a section.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..models import Framework
from .templates import render

BASE_ENV_FILES = [".env", ".env.local", ".env.*.local"]
EDITOR_AND_OS = [
    ".vscode/*",
    "!.vscode/extensions.json",
    ".idea",
    "*.log",
    "npm-debug.log*",
    "yarn-debug.log*",
    "yarn-error.log*",
    "pnpm-debug.log*",
    ".DS_Store",
    "Thumbs.db",
]


class GitignoreOptions(BaseModel):
    """Entries contributed by a framework."""

    build_dirs: list[str] = Field(default_factory=lambda: ["dist"])
    dependencies: list[str] = Field(default_factory=lambda: ["node_modules"])
    framework_specific: list[str] = Field(default_factory=list)
    additional_env_files: list[str] = Field(default_factory=list)


GITIGNORE_PRESETS: dict[Framework, GitignoreOptions] = {
    Framework.REACT: GitignoreOptions(build_dirs=["dist", "dist-ssr"]),
    Framework.ASTRO: GitignoreOptions(
        build_dirs=["dist/", ".astro/"],
        dependencies=["node_modules/"],
        additional_env_files=[".env.production"],
    ),
    Framework.NEXT: GitignoreOptions(
        build_dirs=["/.next/", "/out/", "/build"],
        dependencies=["node_modules", "/.pnp", ".pnp.*", ".yarn/*"],
        framework_specific=["*.tsbuildinfo", "next-env.d.ts", ".vercel"],
        additional_env_files=[
            ".env.development.local",
            ".env.test.local",
            ".env.production.local",
        ],
    ),
    Framework.EXPRESS: GitignoreOptions(
        build_dirs=["dist/", "build/"],
        dependencies=["node_modules/"],
        framework_specific=["coverage/"],
        additional_env_files=[".env.development", ".env.production", ".env.test"],
    ),
}

_GITIGNORE = """\
# Dependencies
{% for entry in dependencies %}
{{ entry }}
{% endfor %}

# Build output
{% for entry in build_dirs %}
{{ entry }}
{% endfor %}

# Environment
{% for entry in env_files %}
{{ entry }}
{% endfor %}

# Editor & OS
{% for entry in editor_and_os %}
{{ entry }}
{% endfor %}
{% if framework_specific %}

# Framework specific
{% for entry in framework_specific %}
{{ entry }}
{% endfor %}
{% endif %}
"""


def render_gitignore(options: GitignoreOptions | None = None) -> str:
    options = options or GitignoreOptions()
    return render(
        _GITIGNORE,
        dependencies=options.dependencies,
        build_dirs=options.build_dirs,
        env_files=BASE_ENV_FILES + options.additional_env_files,
        editor_and_os=EDITOR_AND_OS,
        framework_specific=options.framework_specific,
    )


def gitignore_for(framework: Framework) -> str:
    """Render the preset ``.gitignore`` for *framework*."""
    return render_gitignore(GITIGNORE_PRESETS[Framework(framework)])
