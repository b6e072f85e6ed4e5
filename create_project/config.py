"""create-project configuration.

Tool-level settings that do not belong to any one generated project: where
the package registry lives, how long to wait for it, and which Node.js
version generated CI workflows target.  All settings are Pydantic v2 models
so they can be validated at construction time and loaded from the
environment without boiler-plate.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field

from .models import PackageManager

_TRUTHY = {"1", "true", "yes", "on"}


class RegistryConfig(BaseModel):
    """Settings for the npm registry lookups."""

    url: str = Field(default="https://registry.npmjs.org")
    timeout: float = Field(default=3.0, gt=0, description="Per-request timeout in seconds")
    offline: bool = Field(
        default=False, description="Skip the network and use bundled fallback versions"
    )


class CIConfig(BaseModel):
    """Settings for generated GitHub Actions workflows."""

    node_version: str = Field(default="20")


class Config(BaseModel):
    """Global create-project configuration.

    Instances are created once by the CLI entry point and passed down to the
    generators and the version resolver.
    """

    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    ci: CIConfig = Field(default_factory=CIConfig)
    default_package_manager: PackageManager = Field(default=PackageManager.NPM)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            CREATE_PROJECT_REGISTRY_URL, CREATE_PROJECT_REGISTRY_TIMEOUT,
            CREATE_PROJECT_OFFLINE, CREATE_PROJECT_NODE_VERSION,
            CREATE_PROJECT_PACKAGE_MANAGER.
        """
        registry_kwargs: dict[str, Any] = {}
        if os.environ.get("CREATE_PROJECT_REGISTRY_URL"):
            registry_kwargs["url"] = os.environ["CREATE_PROJECT_REGISTRY_URL"].rstrip("/")
        if os.environ.get("CREATE_PROJECT_REGISTRY_TIMEOUT"):
            registry_kwargs["timeout"] = float(os.environ["CREATE_PROJECT_REGISTRY_TIMEOUT"])
        if os.environ.get("CREATE_PROJECT_OFFLINE"):
            registry_kwargs["offline"] = (
                os.environ["CREATE_PROJECT_OFFLINE"].strip().lower() in _TRUTHY
            )

        ci_kwargs: dict[str, Any] = {}
        if os.environ.get("CREATE_PROJECT_NODE_VERSION"):
            ci_kwargs["node_version"] = os.environ["CREATE_PROJECT_NODE_VERSION"]

        kwargs: dict[str, Any] = {}
        if os.environ.get("CREATE_PROJECT_PACKAGE_MANAGER"):
            kwargs["default_package_manager"] = os.environ["CREATE_PROJECT_PACKAGE_MANAGER"]

        return cls(
            registry=RegistryConfig(**registry_kwargs),
            ci=CIConfig(**ci_kwargs),
            **kwargs,
        )
