"""Shared pytest fixtures for the create-project test suite.

Provides reusable fixtures for:
- An offline version resolver (no network access in unit tests)
- A ``ProjectConfiguration`` factory writing into ``tmp_path``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from create_project.config import Config, RegistryConfig
from create_project.models import ProjectConfiguration
from create_project.registry import VersionResolver


# ---------------------------------------------------------------------------
# Resolver & settings
# ---------------------------------------------------------------------------


@pytest.fixture
def offline_resolver() -> VersionResolver:
    """Resolver that never touches the network and uses bundled versions."""
    return VersionResolver(offline=True)


@pytest.fixture
def offline_settings() -> Config:
    return Config(registry=RegistryConfig(offline=True))


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------


@pytest.fixture
def make_config(tmp_path: Path) -> Callable[..., ProjectConfiguration]:
    """Factory for configurations generated under ``tmp_path``.

    Usage::

        config = make_config("express", database="postgresql", authentication=True)
    """

    def _make(
        framework: str,
        name: str = "my-app",
        package_manager: str = "npm",
        **options: Any,
    ) -> ProjectConfiguration:
        return ProjectConfiguration(
            name=name,
            framework=framework,
            target_directory=tmp_path / name.rsplit("/", 1)[-1],
            package_manager=package_manager,
            initialize_git=False,
            install_dependencies=False,
            options={"framework": framework, **options},
        )

    return _make

