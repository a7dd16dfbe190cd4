"""Shared low-level helpers: paths, YAML I/O and mapping merges."""
