"""Core application wiring: settings, logging and the dependency container."""
