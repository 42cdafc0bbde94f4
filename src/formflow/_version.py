"""Installed formflow version."""

from importlib.metadata import PackageNotFoundError, version

DIST_NAME = "formflow"
UNKNOWN_VERSION = "0+unknown"


def get_version() -> str:
    """Version of the installed distribution, or a placeholder outside an install."""
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return UNKNOWN_VERSION
