"""Version lookup for CSC."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

# Present only in a source checkout (src/csc/_version.py -> repo root)
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Version declared in the checkout's pyproject.toml, else the installed one."""
    if _PYPROJECT.is_file():
        with _PYPROJECT.open("rb") as f:
            declared = tomllib.load(f).get("project", {}).get("version")
        if declared:
            return declared
    try:
        return version("csc")
    except PackageNotFoundError:
        return "0.0.0"
