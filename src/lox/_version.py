"""Version lookup for lox; the CLI and the package both read it from here."""

import tomllib
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Installed distribution version, or the source checkout's pyproject.toml."""
    try:
        return version("lox")
    except PackageNotFoundError:
        pass
    if _PYPROJECT.is_file():
        with _PYPROJECT.open("rb") as f:
            return tomllib.load(f)["project"]["version"]
    return "0.0.0"
