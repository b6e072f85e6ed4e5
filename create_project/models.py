"""Pydantic v2 models describing the project to scaffold.

A ``ProjectConfiguration`` carries the project identity (name, target
directory, package manager), the post-generation toggles, and exactly one
framework-specific option record.  The option records form a discriminated
union on their ``framework`` field, so a React configuration can never carry
Express flags and vice versa.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Base class for precondition failures reported to the user."""


class InvalidProjectNameError(ScaffoldError, ValueError):
    """Raised when a project name is not a valid npm package name."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid project name {name!r}: {reason}")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Framework(str, Enum):
    """Supported target frameworks."""
    REACT = "react"
    ASTRO = "astro"
    NEXT = "next"
    EXPRESS = "express"


class PackageManager(str, Enum):
    """Node.js package managers a generated project can be set up with."""
    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"


class Database(str, Enum):
    """Persistence choices for the Express API server.

    ``postgresql`` is wired through the Prisma ORM, ``mongodb`` through
    Mongoose.
    """
    NONE = "none"
    POSTGRESQL = "postgresql"
    MONGODB = "mongodb"


FRAMEWORK_LABELS: dict[Framework, str] = {
    Framework.REACT: "React (Vite)",
    Framework.ASTRO: "Astro",
    Framework.NEXT: "Next.js",
    Framework.EXPRESS: "Express API",
}


# ---------------------------------------------------------------------------
# Project name validation
# ---------------------------------------------------------------------------

_NPM_NAME_RE = re.compile(
    r"^(?:@[a-z0-9-*~][a-z0-9-*._~]*/)?[a-z0-9-~][a-z0-9-._~]*$"
)


def project_name_error(name: str) -> str | None:
    """Return a human-readable reason why *name* is invalid, or ``None``."""
    if not name or not name.strip():
        return "the project name cannot be empty"
    if not _NPM_NAME_RE.match(name):
        return (
            "start with a lowercase letter, digit, '-' or '~', then use only "
            "lowercase letters, digits, '-', '.', '_' or '~' "
            "(optionally prefixed with an @scope/)"
        )
    return None


def check_project_name(name: str) -> str:
    """Validate *name* against the npm package-name grammar.

    Raises:
        InvalidProjectNameError: If the name is empty or malformed.
    """
    reason = project_name_error(name)
    if reason is not None:
        raise InvalidProjectNameError(name, reason)
    return name


# ---------------------------------------------------------------------------
# Framework option records
# ---------------------------------------------------------------------------


class _Options(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    github_actions: bool = Field(default=False, description="Generate a CI workflow")


class ReactOptions(_Options):
    """Feature toggles for a Vite + React single-page application."""
    framework: Literal["react"] = "react"
    tailwind: bool = False
    react_router: bool = False
    zustand: bool = False


class AstroOptions(_Options):
    """Feature toggles for an Astro static site."""
    framework: Literal["astro"] = "astro"
    tailwind: bool = False


class NextOptions(_Options):
    """Feature toggles for a Next.js App Router project."""
    framework: Literal["next"] = "next"
    tailwind: bool = False
    zustand: bool = False


class ExpressOptions(_Options):
    """Feature toggles for an Express + TypeScript API server."""
    framework: Literal["express"] = "express"
    database: Database = Database.NONE
    authentication: bool = False
    swagger: bool = Field(default=False, description="Serve OpenAPI docs at /api/docs")
    docker: bool = Field(default=False, description="Dockerfile and docker-compose.yml")

    @model_validator(mode="after")
    def _authentication_needs_database(self) -> "ExpressOptions":
        if self.authentication and self.database is Database.NONE:
            raise ValueError("authentication requires a database (postgresql or mongodb)")
        return self

    @property
    def has_database(self) -> bool:
        return self.database is not Database.NONE


FrameworkOptions = Annotated[
    Union[ReactOptions, AstroOptions, NextOptions, ExpressOptions],
    Field(discriminator="framework"),
]

_OPTION_TYPES: dict[Framework, type[_Options]] = {
    Framework.REACT: ReactOptions,
    Framework.ASTRO: AstroOptions,
    Framework.NEXT: NextOptions,
    Framework.EXPRESS: ExpressOptions,
}


def default_options(framework: Framework | str) -> _Options:
    """Return the option record with every toggle at its default."""
    return _OPTION_TYPES[Framework(framework)]()


# ---------------------------------------------------------------------------
# Project configuration
# ---------------------------------------------------------------------------


class ProjectConfiguration(BaseModel):
    """Everything needed to scaffold one project."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="npm package name, also the default directory")
    framework: Framework
    target_directory: Optional[Path] = Field(
        default=None, description="Where to generate; defaults to ./<name>"
    )
    package_manager: PackageManager = PackageManager.NPM
    initialize_git: bool = True
    install_dependencies: bool = True
    options: Optional[FrameworkOptions] = None

    @field_validator("name")
    @classmethod
    def _valid_name(cls, value: str) -> str:
        return check_project_name(value)

    @model_validator(mode="after")
    def _fill_defaults(self) -> "ProjectConfiguration":
        if self.target_directory is None:
            self.target_directory = Path(".") / self.name
        if self.options is None:
            self.options = default_options(self.framework)
        elif self.options.framework != self.framework.value:
            raise ValueError(
                f"options for {self.options.framework!r} given for a "
                f"{self.framework.value!r} project"
            )
        return self

    @property
    def project_path(self) -> Path:
        """Absolute path of the directory that will hold the project."""
        return Path(self.target_directory).resolve()
