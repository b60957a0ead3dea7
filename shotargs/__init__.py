"""Command-line option parsing for a screenshot capture tool."""

__version__ = "1.0.0"
