"""Adapters (infrastructure) for the ports-and-adapters architecture."""
