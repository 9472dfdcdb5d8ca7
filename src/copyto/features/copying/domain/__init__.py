"""Domain values for the copy feature."""
