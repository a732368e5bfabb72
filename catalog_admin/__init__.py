"""
Top-level package for the catalog admin dashboard.

This package exposes the core architecture (domain, services, UI adapters).
Most code should import from submodules such as:
    catalog_admin.core
    catalog_admin.services
    catalog_admin.ui
"""

__all__: list[str] = []
