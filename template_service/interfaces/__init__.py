"""Transport interfaces exposing application services."""
