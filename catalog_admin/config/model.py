from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

DEFAULT_API_BASE_URL = "https://api.escuelajs.co/api/v1"


@dataclass
class GlobalConfig:
    """
    Parsed global.json.

    - api_base_url: root of the remote catalog API (the client appends /products)
    - page_size_options: choices offered by the page-size selector
    - default_page_size: must be one of page_size_options
    - placeholder_thumbnail / placeholder_image: shown when a product has no image
    """

    ui_title: str = "Product Admin"
    subtitle: str = "Catalog dashboard"
    api_base_url: str = DEFAULT_API_BASE_URL
    page_size_options: List[int] = field(default_factory=lambda: [5, 10, 20, 50])
    default_page_size: int = 10
    placeholder_thumbnail: str = "https://via.placeholder.com/50"
    placeholder_image: str = "https://via.placeholder.com/150"
