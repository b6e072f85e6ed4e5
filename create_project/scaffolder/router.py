"""Dispatch a configuration to the generator for its framework."""

from __future__ import annotations

from pathlib import Path
from typing import assert_never

from ..config import Config
from ..models import Framework, ProjectConfiguration
from ..registry import VersionResolver
from .astro_gen import AstroGenerator
from .express_gen import ExpressGenerator
from .generator import ProjectGenerator
from .next_gen import NextGenerator
from .react_gen import ReactGenerator


def generator_for(
    config: ProjectConfiguration,
    resolver: VersionResolver | None = None,
    settings: Config | None = None,
) -> ProjectGenerator:
    """Instantiate the generator matching ``config.framework``.

    The chain is exhaustive over ``Framework``; adding a member without a
    branch here is reported by the type checker at ``assert_never``.
    """
    framework = config.framework
    if framework is Framework.REACT:
        return ReactGenerator(config, resolver, settings)
    elif framework is Framework.ASTRO:
        return AstroGenerator(config, resolver, settings)
    elif framework is Framework.NEXT:
        return NextGenerator(config, resolver, settings)
    elif framework is Framework.EXPRESS:
        return ExpressGenerator(config, resolver, settings)
    else:
        assert_never(framework)


async def generate_project(
    config: ProjectConfiguration,
    resolver: VersionResolver | None = None,
    settings: Config | None = None,
) -> Path:
    """Generate the project described by *config* and return its root."""
    return await generator_for(config, resolver, settings).generate()
