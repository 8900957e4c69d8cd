"""Command-line interface for simnet."""
