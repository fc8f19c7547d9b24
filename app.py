import logging
import os
import socket

from gacha_browser.ui.dash_app import create_dash_app
from gacha_browser.logging_config import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

app = create_dash_app(os.getenv("GACHA_BROWSER_CONFIG_ROOT", "config"))
server = app.server


def find_free_port(start_port: int, host: str = "localhost", attempts: int = 100) -> int:
    """First port from start_port on that nothing on `host` is listening to."""
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex((host, port)) != 0:
                return port
    return start_port


if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")
    preferred_port = int(os.getenv("PORT", "8050"))
    final_port = find_free_port(preferred_port)
    debug = os.getenv("DEBUG", "0") == "1"

    if final_port != preferred_port:
        logger.warning(
            "Preferred port taken, using the next free one",
            extra={"preferred_port": preferred_port, "port": final_port},
        )

    logger.info("Starting gacha browser", extra={"host": host, "port": final_port, "debug": debug})
    app.run(host=host, port=final_port, debug=debug)
