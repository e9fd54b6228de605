"""Render RAML API descriptions into a single HTML page."""

__version__ = "0.3.0"
