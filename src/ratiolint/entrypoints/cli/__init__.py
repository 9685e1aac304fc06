"""Command-line interface for RATIOLINT."""
