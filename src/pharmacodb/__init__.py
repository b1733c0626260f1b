"""pharmacodb - read-only REST API over pharmacogenomic experiment data."""

__version__ = "0.1.0"
