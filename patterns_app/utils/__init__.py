"""
Utility functions module.

Shared helpers for rendering example output.
"""
