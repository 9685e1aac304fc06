"""Adapters between the validator and the outside world (input listings, output)."""
