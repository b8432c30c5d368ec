"""Command-line interface for hdfsctl."""
