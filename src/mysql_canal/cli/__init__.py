"""Command line interface for the canal configuration tooling."""
