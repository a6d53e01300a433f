"""Utils for the package."""
