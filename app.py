import logging
import os
import socket

from catalog_admin.logging_config import configure_logging
from catalog_admin.ui.dash_app import create_dash_app

configure_logging()
logger = logging.getLogger("catalog_admin.app")

app = create_dash_app()
server = app.server

PORT_SEARCH_SPAN = 100


def find_free_port(start_port: int, host: str = "localhost") -> int:
    """Return the first port from start_port upwards that nothing listens on."""
    for port in range(start_port, start_port + PORT_SEARCH_SPAN):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex((host, port)) != 0:
                return port
    return start_port


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    preferred_port = int(os.getenv("PORT", "8050"))
    port = find_free_port(preferred_port)
    debug = os.getenv("DEBUG", "0") == "1"

    if port != preferred_port:
        logger.warning("port_taken", extra={"preferred_port": preferred_port, "port": port})
    logger.info("starting_dashboard", extra={"host": host, "port": port, "debug": debug})

    app.run(host=host, port=port, debug=debug)


if __name__ == "__main__":
    main()
