"""Concurrent response-header auditing for crate download artifacts."""

__version__ = "0.1.0"
