"""Package manager hinting for the printed next steps."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_PACKAGE_MANAGER = "npm"
USER_AGENT_ENV = "npm_config_user_agent"


@dataclass(frozen=True)
class PackageManager:
    """Package manager parsed from an npm-style user agent."""

    name: str
    version: str | None = None


def pkg_from_user_agent(user_agent: str | None) -> PackageManager | None:
    """Parse ``"pnpm/8.6.0 npm/? node/v18.16.0 linux x64"`` style strings."""
    if not user_agent or not user_agent.strip():
        return None
    spec = user_agent.split()[0]
    name, _, version = spec.partition("/")
    return PackageManager(name=name, version=version or None)


def detect_package_manager(
    env: Mapping[str, str] | None = None, configured: str | None = None
) -> str:
    """Return the package manager name to suggest.

    Resolution order:
    1. The user agent of the invoking package manager
    2. The configured ``package_manager``
    3. npm
    """
    if env is None:
        env = os.environ
    info = pkg_from_user_agent(env.get(USER_AGENT_ENV))
    if info:
        return info.name
    return configured or DEFAULT_PACKAGE_MANAGER


def next_steps(pkg_manager: str) -> list[str]:
    """Commands to install dependencies and start the dev server."""
    if pkg_manager == "yarn":
        return ["yarn", "yarn dev"]
    return [f"{pkg_manager} install", f"{pkg_manager} run dev"]
