"""Core functionality for Hue control.

This package contains:
- config: Configuration file storage
- gateway: HTTP requests against the bridge and their wait-handles
- errors: Error types
"""
