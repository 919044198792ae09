"""Hotel discovery, reviews and saved lists on an embedded SQLite store."""

__version__ = "0.1.0"
