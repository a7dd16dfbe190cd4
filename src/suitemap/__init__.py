"""
suitemap - hierarchical test-suite discovery

Maps arbitrary file and directory arguments onto the test suites that own
them, and resolves the effective per-directory configuration inside a suite.
"""

__version__ = "0.3.0"
__all__ = ["__version__"]
