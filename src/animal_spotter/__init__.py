"""
Animal Spotter - an async client for the Animal Spotter sighting API.

This package provides an authenticated API client for signing up, signing
in, listing sighted animals, fetching sighting details and their images,
together with a small command-line front end.
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from typing import Final

# Package metadata
VERSION: Final[str] = __version__
PACKAGE_NAME: Final[str] = "animal-spotter"
USER_AGENT: Final[str] = f"{PACKAGE_NAME}/{VERSION}"

__all__ = [
    "__version__",
    "VERSION",
    "PACKAGE_NAME",
    "USER_AGENT",
]
