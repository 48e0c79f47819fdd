"""Adapters that connect the core to the filesystem and the environment."""
