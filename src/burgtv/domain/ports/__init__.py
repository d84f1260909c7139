from .playlist_validator import PlaylistValidatorPort

__all__ = ["PlaylistValidatorPort"]
