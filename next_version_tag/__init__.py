"""Derive the next version tag of a repository from a tag format template."""

from .tag_format import resolve_tag_format
from .versioning import get_next_version

__version__ = "0.1.0"

__all__ = ["get_next_version", "resolve_tag_format"]
