"""Command line interface for resdeps."""
