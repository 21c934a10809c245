"""Domain models and repository contracts."""
