"""CLI command groups registered on the root ``cli`` in ``crobrew.main``."""
