"""Core configuration, errors and primitives."""
