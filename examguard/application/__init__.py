"""Application layer: ports, services and activity adapters."""
