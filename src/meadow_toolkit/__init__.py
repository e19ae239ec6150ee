"""Top-level package for the Meadow Toolkit.

Provides subpackages:
- meadow_toolkit.core – immutable catalog and outcome models
- meadow_toolkit.catalog – plant/measure catalog loading and thumbnails
- meadow_toolkit.engine – staged Q2 decision engine
- meadow_toolkit.gui – PySide6 wizard
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    from pathlib import Path

    # In dev mode, read directly from pyproject.toml
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
        except OSError:
            content = ""
        for line in content.splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    try:
        return pkg_version("meadow_toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
