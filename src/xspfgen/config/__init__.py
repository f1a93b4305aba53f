"""Configuration values for playlist generation."""

from xspfgen.config.config import MediaProfile, OutputPlacement, PlaylistConfig, SortPolicy

__all__ = ["MediaProfile", "OutputPlacement", "PlaylistConfig", "SortPolicy"]
