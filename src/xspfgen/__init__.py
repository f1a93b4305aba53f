"""xspfgen: XSPF playlists from media directory trees."""

__version__ = "0.1.0"
