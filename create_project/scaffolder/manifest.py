"""``package.json`` assembly.

Generators describe their manifest as a ``ManifestSpec``: which packages
they need and which scripts they expose, accumulated as unions so each
feature flag can contribute independently.  ``build_manifest`` then resolves
every package version in a single batch and returns the final document.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from ..registry import ResolvedVersions, VersionResolver


class ManifestSpec(BaseModel):
    """Package names and scripts, before versions are known."""

    dependencies: list[str] = Field(default_factory=list)
    dev_dependencies: list[str] = Field(default_factory=list)
    scripts: dict[str, str] = Field(default_factory=dict)
    module: bool = Field(default=True, description='Emit "type": "module"')

    def add(
        self,
        dependencies: list[str] | None = None,
        dev_dependencies: list[str] | None = None,
        scripts: dict[str, str] | None = None,
    ) -> "ManifestSpec":
        """Merge packages and scripts into this record and return it."""
        for name in dependencies or []:
            if name not in self.dependencies:
                self.dependencies.append(name)
        for name in dev_dependencies or []:
            if name not in self.dev_dependencies:
                self.dev_dependencies.append(name)
        self.scripts.update(scripts or {})
        return self

    @property
    def all_packages(self) -> list[str]:
        return list(dict.fromkeys(self.dependencies + self.dev_dependencies))


def assemble_manifest(
    name: str, packages: ManifestSpec, versions: dict[str, str]
) -> dict[str, Any]:
    """Combine *packages* with resolved *versions* into a ``package.json`` mapping.

    Dependency maps are sorted by package name, as npm writes them.
    """
    manifest: dict[str, Any] = {
        "name": name,
        "version": "0.1.0",
        "private": True,
    }
    if packages.module:
        manifest["type"] = "module"
    manifest["scripts"] = dict(packages.scripts)
    manifest["dependencies"] = {
        pkg: versions.get(pkg, "latest") for pkg in sorted(packages.dependencies)
    }
    manifest["devDependencies"] = {
        pkg: versions.get(pkg, "latest") for pkg in sorted(packages.dev_dependencies)
    }
    return manifest


async def build_manifest(
    name: str, packages: ManifestSpec, resolver: VersionResolver
) -> tuple[dict[str, Any], ResolvedVersions]:
    """Resolve every package in *packages* and return the manifest and lookup result."""
    resolved = await resolver.resolve_with_status(packages.all_packages)
    return assemble_manifest(name, packages, resolved.versions), resolved
