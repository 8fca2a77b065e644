"""Adapters – Redis object cache and FastAPI HTTP surfaces.

Import the concrete adapter subpackage you need; each one pulls in its
optional third-party dependency lazily.
"""
