"""Infrastructure adapters (database engine, document store, repositories)."""
