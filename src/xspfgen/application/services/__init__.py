"""Application services."""

from .playlist_service import GenerateRequest, PlaylistResult, PlaylistService

__all__ = ["GenerateRequest", "PlaylistResult", "PlaylistService"]
