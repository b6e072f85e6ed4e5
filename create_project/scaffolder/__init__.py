"""create-project scaffolder -- generates framework starter projects.

Takes a ``ProjectConfiguration`` and writes a ready-to-install project for
React (Vite), Astro, Next.js or Express into its target directory.

Quick usage::

    from create_project.models import ProjectConfiguration
    from create_project.scaffolder import generate_project

    config = ProjectConfiguration(name="my-app", framework="react")
    project_path = await generate_project(config)
"""

from create_project.scaffolder.generator import ProjectGenerator
from create_project.scaffolder.router import generate_project, generator_for
from create_project.scaffolder.templates import TemplateRenderer

__all__ = [
    "ProjectGenerator",
    "TemplateRenderer",
    "generate_project",
    "generator_for",
]
