from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List

from catalog_admin.config.model import GlobalConfig
from catalog_admin.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

API_URL_ENV = "CATALOG_ADMIN_API_URL"


def _page_sizes(raw: Any) -> List[int]:
    if not isinstance(raw, list) or not raw:
        raise ConfigError("page_size_options must be a non-empty list of integers")
    sizes = []
    for value in raw:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigError(f"Invalid page size in page_size_options: {value!r}")
        sizes.append(value)
    return sizes


def load_global_config(root: Path) -> GlobalConfig:
    """
    Load global.json from the config directory.

    CATALOG_ADMIN_API_URL, when set, wins over the file's api_base_url.

    :raises FileNotFoundError: if global.json is missing
    :raises ConfigError: if a value is present but unusable
    """
    root = Path(root)
    logger.info("Loading global config", extra={"config_root": str(root)})

    global_path = root / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    with global_path.open() as f:
        try:
            raw: Dict[str, Any] = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"{global_path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"{global_path} must contain a JSON object")

    defaults = GlobalConfig()

    page_size_options = _page_sizes(raw.get("page_size_options", defaults.page_size_options))
    default_page_size = raw.get("default_page_size", defaults.default_page_size)
    if default_page_size not in page_size_options:
        raise ConfigError(
            f"default_page_size {default_page_size!r} is not one of {page_size_options}"
        )

    api_base_url = os.getenv(API_URL_ENV) or raw.get("api_base_url", defaults.api_base_url)
    if not isinstance(api_base_url, str) or not api_base_url.startswith(("http://", "https://")):
        raise ConfigError(f"api_base_url must be an http(s) URL, got {api_base_url!r}")

    config = GlobalConfig(
        ui_title=raw.get("ui_title", defaults.ui_title),
        subtitle=raw.get("subtitle", defaults.subtitle),
        api_base_url=api_base_url,
        page_size_options=page_size_options,
        default_page_size=default_page_size,
        placeholder_thumbnail=raw.get("placeholder_thumbnail", defaults.placeholder_thumbnail),
        placeholder_image=raw.get("placeholder_image", defaults.placeholder_image),
    )

    logger.info(
        "Global config loaded",
        extra={"api_base_url": config.api_base_url, "page_size": config.default_page_size},
    )
    return config
