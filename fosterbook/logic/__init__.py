"""Command parsing and execution."""
