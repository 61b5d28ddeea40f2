"""
Core utilities shared across the API.

This package hosts configuration, logging setup and credential hashing.
Services and routers depend on these primitives instead of reading os.environ
or touching hashing libraries directly.
"""
