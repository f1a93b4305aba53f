"""Where: src/xspfgen/config/settings.py
What: Fixed constants for the XSPF document and the default extension sets.
Why: Expose shared values to feature layers without duplicating literals.
"""

from __future__ import annotations

from typing import Final

# Document -------------------------------------------------------------------

XSPF_NAMESPACE: Final[str] = "http://xspf.org/ns/0/"
XSPF_VERSION: Final[str] = "1"
PLAYLIST_SUFFIX: Final[str] = ".xspf"

# Characters allowed unescaped inside a location segment. ':' is excluded so a
# first segment can never be read as a URI scheme.
URI_SAFE_CHARACTERS: Final[str] = "!$&'()*+,;=@"

DEFAULT_INDENT: Final[str] = "\t"
DEFAULT_TRACK_START: Final[int] = 1

# Extensions (case-sensitive, dot included) ----------------------------------

VIDEO_EXTENSIONS: Final[frozenset[str]] = frozenset({".mp4", ".mkv", ".webm"})
AUDIO_EXTENSIONS: Final[frozenset[str]] = frozenset({".mp3", ".m4a", ".wav"})
DEFAULT_IMAGE_EXTENSIONS: Final[frozenset[str]] = frozenset({".png", ".jpg", ".jpeg"})
DEFAULT_DESCRIPTION_EXTENSION: Final[str] = ".description"


__all__ = [
    "AUDIO_EXTENSIONS",
    "DEFAULT_DESCRIPTION_EXTENSION",
    "DEFAULT_IMAGE_EXTENSIONS",
    "DEFAULT_INDENT",
    "DEFAULT_TRACK_START",
    "PLAYLIST_SUFFIX",
    "URI_SAFE_CHARACTERS",
    "VIDEO_EXTENSIONS",
    "XSPF_NAMESPACE",
    "XSPF_VERSION",
]
