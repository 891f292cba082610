"""Command-line interface for workspace-sync."""
