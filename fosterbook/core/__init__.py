"""Core domain models for Fosterbook."""
