"""
Core primitives shared across the API: settings, logging setup, the
error hierarchy and numeric coercion helpers.
"""
