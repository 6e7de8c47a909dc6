"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, errors, coercion),
``schemas`` (pydantic payloads), ``services`` (the employee store) and
``api`` (versioned routers and exception handlers).
"""

from .main import app  # noqa: F401
