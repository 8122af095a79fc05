import os
import socket

from covid_browser.logging_config import configure_logging
from covid_browser.ui.dash_app import create_dash_app

configure_logging()

app = create_dash_app(os.getenv("COVID_BROWSER_CONFIG_ROOT", "config"))
server = app.server


def find_free_port(start_port: int, attempts: int = 100) -> int:
    """First port from start_port upwards that nothing is listening on."""
    for port in range(start_port, start_port + attempts):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            if s.connect_ex(("localhost", port)) != 0:
                return port
    return start_port


if __name__ == "__main__":
    requested_port = int(os.getenv("PORT", "8051"))
    port = find_free_port(requested_port)
    if port != requested_port:
        print(f"Port {requested_port} is busy, using {port} instead")

    app.run(host="0.0.0.0", port=port, debug=os.getenv("DEBUG", "0") == "1")
