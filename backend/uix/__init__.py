"""Console web server: SPA shell, static bundle and API entry point."""

__version__ = "1.0.0"
