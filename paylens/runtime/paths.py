"""Centralized path management for paylens.

A single source of truth for where rule overrides live, so loaders do not
each guess at the working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _get_project_root() -> Path:
    """Determine the project root directory (PAYLENS_HOME or the current directory)."""
    env_root = os.environ.get("PAYLENS_HOME")
    if env_root:
        return Path(env_root).expanduser()
    return Path.cwd()


@dataclass
class ProjectPaths:
    """Container for project-related paths.

    Project paths are relative to the project root; packaged defaults are
    relative to the installed paylens package.
    """

    root: Path = field(default_factory=_get_project_root)

    def __post_init__(self) -> None:
        self.root = self.root.resolve()

    # --- Package paths ---
    @property
    def src(self) -> Path:
        """Installed paylens package directory."""
        return Path(__file__).resolve().parent.parent

    @property
    def default_keyword_rules(self) -> Path:
        """Packaged default keyword rules TOML file."""
        return self.src / "rules" / "default_keyword_rules.toml"

    # --- Configuration paths ---
    @property
    def config(self) -> Path:
        """Configuration directory (config/)."""
        return self.root / "config"

    @property
    def keyword_rules(self) -> Path:
        """Project-level keyword rules override TOML file."""
        return self.config / "keyword_rules.toml"


_paths: ProjectPaths | None = None


def get_paths() -> ProjectPaths:
    """Get the shared ProjectPaths instance."""
    global _paths
    if _paths is None:
        _paths = ProjectPaths()
    return _paths


def reset_paths() -> None:
    """Forget the cached ProjectPaths so the next call re-reads PAYLENS_HOME."""
    global _paths
    _paths = None
