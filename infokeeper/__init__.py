"""InfoKeeper: record and list personal records in a local SQLite store."""

__version__ = "0.1.0"
