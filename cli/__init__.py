"""Command-line interface for the document harvester."""
