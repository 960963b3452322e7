"""Command-line interface for CRUSH."""
