from pathlib import Path
from typing import Optional
from figurekit.core.config.settings import settings
from .session import ServerSession

def start_server(base_path: str, start_port: Optional[int] = None, port_range: Optional[int] = None) -> str:
    """
    Public Service API: expose `base_path` over loopback HTTP.

    Args:
        base_path: Directory whose files become fetchable as
            `<url>/<url-encoded relative path>`.
        start_port: First port to try (defaults to the configured port).
        port_range: How many consecutive ports to try (defaults to the configured range).

    Returns:
        Base URL, e.g. "http://127.0.0.1:8899".
    """
    ports = None
    if start_port is not None or port_range is not None:
        first = start_port if start_port is not None else settings.SERVER_DEFAULT_PORT
        width = port_range if port_range is not None else settings.SERVER_PORT_RANGE
        ports = range(first, first + width)

    return ServerSession().start(Path(base_path), ports).url

def stop_server() -> None:
    """Stops the active file server, if any."""
    ServerSession().stop()

def get_server_url() -> Optional[str]:
    info = ServerSession().current()
    return info.url if info else None
