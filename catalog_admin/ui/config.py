from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from catalog_admin.config.model import GlobalConfig
from catalog_admin.services.catalog_client import CatalogClient


@dataclass
class AppConfig:
    config_root: Path
    global_config: GlobalConfig
    client: Optional[CatalogClient] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.client is None:
            raise RuntimeError("AppConfig.client must be initialized.")
