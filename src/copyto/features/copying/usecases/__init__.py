"""Use cases for the copy feature."""
