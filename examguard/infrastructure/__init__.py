"""Infrastructure layer: observability, caches, adapters and in-memory stubs."""
