"""Content-completeness auditing for mdBook courses."""

__version__ = "0.1.0"
