"""npm registry version resolver.

Looks up the latest published version of each package a generated project
depends on and turns it into a caret range (``^1.2.3``).  Lookups never fail:
when the registry is unreachable, slow or returns garbage, the resolver falls
back to a bundled table of known-good versions, and to the literal
``"latest"`` for packages the table does not know.

Typical usage::

    resolver = VersionResolver()
    resolved = await resolver.resolve_with_status(["react", "react-dom"])
    resolved.versions["react"]   # "^19.1.0"
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Mapping, MutableMapping
from types import MappingProxyType
from urllib.parse import quote

import httpx
from pydantic import BaseModel, Field

from .config import RegistryConfig

LATEST = "latest"

FALLBACK_VERSIONS: Mapping[str, str] = MappingProxyType({
    # React
    "react": "^19.1.0",
    "react-dom": "^19.1.0",
    "react-router-dom": "^7.6.0",
    "zustand": "^5.0.4",
    "@vitejs/plugin-react": "^4.4.1",
    "vite": "^6.3.5",
    # Next.js
    "next": "^15.3.2",
    "eslint-config-next": "^15.3.2",
    # Astro
    "astro": "^5.7.13",
    "@astrojs/check": "^0.9.4",
    # Express
    "express": "^5.1.0",
    "cors": "^2.8.5",
    "helmet": "^8.1.0",
    "dotenv": "^16.5.0",
    "zod": "^3.24.4",
    "mongoose": "^8.14.1",
    "@prisma/client": "^6.6.0",
    "prisma": "^6.6.0",
    "bcrypt": "^5.1.1",
    "jsonwebtoken": "^9.0.2",
    "swagger-ui-express": "^5.0.1",
    "swagger-jsdoc": "^6.2.8",
    "tsx": "^4.19.4",
    # Types
    "typescript": "^5.8.3",
    "@types/node": "^22.15.21",
    "@types/react": "^19.1.2",
    "@types/react-dom": "^19.1.2",
    "@types/express": "^5.0.2",
    "@types/cors": "^2.8.18",
    "@types/bcrypt": "^5.0.2",
    "@types/jsonwebtoken": "^9.0.9",
    "@types/swagger-ui-express": "^4.1.8",
    "@types/swagger-jsdoc": "^6.0.4",
    # Linting
    "eslint": "^9.27.0",
    "@eslint/js": "^9.25.0",
    "eslint-plugin-react-hooks": "^5.2.0",
    "eslint-plugin-react-refresh": "^0.4.19",
    "globals": "^16.0.0",
    "typescript-eslint": "^8.30.1",
    # Tailwind CSS
    "tailwindcss": "^4.1.6",
    "@tailwindcss/vite": "^4.1.6",
    "@tailwindcss/postcss": "^4.1.6",
})


class ResolvedVersions(BaseModel):
    """Result of a batch lookup."""

    versions: dict[str, str] = Field(default_factory=dict)
    from_network: bool = Field(
        default=False, description="False when the registry was skipped entirely"
    )


class VersionResolver:
    """Resolves npm package names to caret version ranges.

    The cache is owned by the resolver but can be injected, which lets tests
    start from an empty or pre-seeded table.  Only versions obtained from the
    registry are cached; fallbacks are recomputed on every call.
    """

    def __init__(
        self,
        registry_url: str = "https://registry.npmjs.org",
        timeout: float = 3.0,
        cache: MutableMapping[str, str] | None = None,
        fallback: Mapping[str, str] | None = None,
        offline: bool = False,
    ) -> None:
        self.registry_url = registry_url.rstrip("/")
        self.timeout = timeout
        self.cache: MutableMapping[str, str] = cache if cache is not None else {}
        self.fallback: Mapping[str, str] = fallback if fallback is not None else FALLBACK_VERSIONS
        self.offline = offline

    @classmethod
    def from_config(cls, config: RegistryConfig) -> "VersionResolver":
        return cls(registry_url=config.url, timeout=config.timeout, offline=config.offline)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.registry_url,
            timeout=httpx.Timeout(self.timeout),
            headers={"Accept": "application/json"},
        )

    def fallback_version(self, name: str) -> str:
        """Return the bundled version for *name*, or ``"latest"``."""
        return self.fallback.get(name, LATEST)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def resolve(self, name: str) -> str:
        """Return ``^<latest>`` for *name*, degrading silently on any failure."""
        if name in self.cache:
            return self.cache[name]
        if self.offline:
            return self.fallback_version(name)

        try:
            async with self._client() as client:
                response = await client.get(f"/{quote(name, safe='@')}")
                response.raise_for_status()
                latest = response.json()["dist-tags"]["latest"]
        except (httpx.HTTPError, ValueError, KeyError, TypeError):
            return self.fallback_version(name)

        if not isinstance(latest, str) or not latest:
            return self.fallback_version(name)

        version = f"^{latest}"
        self.cache[name] = version
        return version

    async def resolve_many(self, names: Iterable[str]) -> dict[str, str]:
        """Resolve several packages concurrently.

        The result preserves the order of *names* with duplicates removed.
        """
        unique = list(dict.fromkeys(names))
        results = await asyncio.gather(*(self.resolve(name) for name in unique))
        return dict(zip(unique, results))

    async def is_network_available(self) -> bool:
        """Return ``True`` if the registry root answers with HTTP 200."""
        if self.offline:
            return False
        try:
            async with self._client() as client:
                response = await client.get("/")
                return response.status_code == 200
        except httpx.HTTPError:
            return False

    async def resolve_with_status(self, names: Iterable[str]) -> ResolvedVersions:
        """Resolve *names*, skipping per-package lookups when the registry is down.

        A single reachability probe decides whether to hit the network at
        all, so an offline run costs one timeout instead of one per package.
        """
        names = list(dict.fromkeys(names))
        if not await self.is_network_available():
            return ResolvedVersions(
                versions={
                    name: self.cache.get(name, self.fallback_version(name)) for name in names
                },
                from_network=False,
            )
        return ResolvedVersions(versions=await self.resolve_many(names), from_network=True)
