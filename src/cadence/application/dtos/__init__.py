"""Data transfer objects returned by commands and queries."""
