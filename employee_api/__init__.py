"""
Top-level package for the Employee API.

The HTTP service lives in ``employee_api.app`` and a small ``requests``
based client in ``employee_api.client``.
"""

__all__ = []
