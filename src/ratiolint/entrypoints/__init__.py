"""Entry points into RATIOLINT."""
