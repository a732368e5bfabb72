"""
Service layer: the remote catalog client, CSV export and the command
dispatcher the UI talks to
"""

from .catalog_client import CatalogClient, ProductDraft, ProductUpdate
from .dashboard_service import CatalogDashboard, CommandResult, Notice
from .export_service import ExportFile, export_csv

__all__ = [
    "CatalogClient",
    "ProductDraft",
    "ProductUpdate",
    "CatalogDashboard",
    "CommandResult",
    "Notice",
    "ExportFile",
    "export_csv",
]
