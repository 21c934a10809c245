"""Application services grouped by feature."""
