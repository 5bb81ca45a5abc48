"""Render the RFC status table of a GitHub repository into a README."""

__version__ = "0.1.0"
