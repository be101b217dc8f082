"""Command-line consumers of the calculator primitives."""
