"""
Summary: Domain types and helpers for playlist generation.
Why: Share value objects between the walker, resolver and writer.
"""

from .errors import InvalidXmlTextError, PathContainmentError, PlaylistError
from .models import MediaFile, PlaylistSummary, Sidecars, Track
from .uri import directory_location, escape_segment, location_for, relative_parts

__all__ = [
    "InvalidXmlTextError",
    "MediaFile",
    "PathContainmentError",
    "PlaylistError",
    "PlaylistSummary",
    "Sidecars",
    "Track",
    "directory_location",
    "escape_segment",
    "location_for",
    "relative_parts",
]
