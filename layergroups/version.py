"""Package version module.

Installed: read from the distribution metadata.
From a source checkout: derived from the VERSION file at the project root.
"""

from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = 'layergroups'


def get_version() -> str:
    """Get the package version string (e.g. '0.1.0')."""
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        return _source_version()


def _source_version() -> str:
    """Derive version from the VERSION file (source checkout only)."""
    # layergroups/version.py -> ../VERSION
    version_file = Path(__file__).resolve().parent.parent / "VERSION"
    try:
        major_minor = version_file.read_text().strip()
    except FileNotFoundError:
        return "0.0.0"
    return f"{major_minor}.0"
