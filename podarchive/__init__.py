"""Static site generator for a podcast archive, built from its RSS feed."""

__version__ = "1.0.0"
