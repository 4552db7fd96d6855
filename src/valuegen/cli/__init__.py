"""Command line interface for valuegen."""
