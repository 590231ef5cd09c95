"""Boundary adapters: database, cache and external language providers."""
