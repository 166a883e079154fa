"""JSON HTTP service for managing stock records in a SQL database."""

__version__ = "0.1.0"