"""Textual viewer acting as a minimal host editor."""
