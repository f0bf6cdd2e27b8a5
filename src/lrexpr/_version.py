"""Version lookup for lrexpr."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Installed distribution version, else the one in a source checkout's pyproject.toml."""
    try:
        return version("lrexpr")
    except PackageNotFoundError:
        pass
    if _PYPROJECT.is_file():
        with _PYPROJECT.open("rb") as f:
            return tomllib.load(f)["project"]["version"]
    return "0.0.0"
