"""Data models and utility functions.

This package contains:
- types: TypedDicts for bridge request and response payloads
- utils: Utility functions (parse_brightness, print_json, similarity_score, etc.)
"""
