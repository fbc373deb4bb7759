"""Data transfer objects for the API boundary."""
