"""Cascade use cases."""
