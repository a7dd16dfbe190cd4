"""Shared helpers for the suitemap test suite."""
