"""Version information for genrepo-tool."""

__version__ = "1.0.0"
