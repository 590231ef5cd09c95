"""Application layer: use-case services and adapters."""
