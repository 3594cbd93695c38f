"""Top-level package for the X card toolkit.

Provides subpackages:
- xcard_toolkit.core – immutable models shared by every stage
- xcard_toolkit.layout – width/height estimation, segmentation and pagination
- xcard_toolkit.images – image dimension discovery and slice cropping
- xcard_toolkit.cli – command-line front end
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.1.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    try:
        from importlib.metadata import version as pkg_version, PackageNotFoundError
        return pkg_version("xcard-toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 xcard-toolkit contributors"
__all__: list[str] = ["__version__"]
