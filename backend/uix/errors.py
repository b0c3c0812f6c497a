"""Exceptions raised by the console server core."""

from pathlib import Path


class ConfigError(Exception):
    """Startup or UI configuration could not be loaded.

    Fatal: the entry point exits before the server binds its socket.
    """


class WallpaperNotFound(Exception):
    """The configured custom login wallpaper does not exist on disk."""

    def __init__(self, path: str | Path):
        self.path = str(path)
        super().__init__(f"Custom Login Wallpaper does not exist: {self.path}")
