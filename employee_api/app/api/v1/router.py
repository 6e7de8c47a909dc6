"""
Top-level router for version 1 of the API.

This router aggregates domain-specific routers under a unified
prefix.  When new resources are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import employees

router = APIRouter()

router.include_router(employees.router, prefix="/employees", tags=["Employees"])
