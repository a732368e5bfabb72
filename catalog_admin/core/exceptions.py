from __future__ import annotations


class CatalogAdminError(Exception):
    """Base exception for all catalog_admin errors"""

    user_message = "Something went wrong."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.user_message)
        if message:
            self.user_message = message


class NetworkFailure(CatalogAdminError):
    """Catalog fetch was rejected, returned an error status or a non-JSON body"""

    user_message = "Could not load product data!"


class RequestFailure(CatalogAdminError):
    """Create/update request came back with a non-success status"""

    user_message = "The request to the product API failed."


class EmptyExport(CatalogAdminError):
    """Nothing to export: the filtered set is empty"""

    user_message = "There is no data to export!"


class NotFound(CatalogAdminError):
    """Detail requested for an id that is not in the loaded catalog"""

    user_message = "Product not found."


class InvalidTransition(CatalogAdminError):
    """Edit session asked to move between states it cannot move between"""

    user_message = "That action is not available right now."


class ConfigError(CatalogAdminError):
    """Invalid or inconsistent global.json"""

    user_message = "Invalid configuration."


class InvalidCommand(CatalogAdminError, ValueError):
    """List command called with an argument the view cannot use (unknown sort field, bad page size)"""

    user_message = "That list option is not valid."
