"""Asset cache, cookie-file reader, media-type helpers and run options for saving web pages."""

__version__ = "0.1.0"
__all__ = ["cache", "cookies", "media", "options"]