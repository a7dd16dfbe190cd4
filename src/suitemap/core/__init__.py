"""Core library for suitemap (no CLI dependencies)."""
