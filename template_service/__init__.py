"""Template service: CRUD over templates exposed as RPC methods."""

__version__ = "1.0.0"
