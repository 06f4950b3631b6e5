"""arithtrainer package."""

from __future__ import annotations

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

__all__ = ["__version__"]


def _version_from_pyproject() -> str | None:
    """Look up the project version from a nearby pyproject.toml when running from source."""
    for base in Path(__file__).resolve().parents:
        pyproject = base / "pyproject.toml"
        if not pyproject.is_file():
            continue
        with pyproject.open("rb") as handle:
            data = tomllib.load(handle)
        project = data.get("project", {})
        if project.get("name") != "arithtrainer":
            continue
        found = project.get("version")
        return found if isinstance(found, str) else None
    return None


_project_version = _version_from_pyproject()
if _project_version is not None:
    __version__ = _project_version
else:
    try:
        __version__ = version("arithtrainer")
    except PackageNotFoundError:
        __version__ = "0+unknown"
