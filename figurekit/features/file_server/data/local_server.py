import errno
import functools
import http.server
import logging
import os
import threading
from pathlib import Path
from typing import Iterable, Optional

from figurekit.core.config.settings import settings
from ..domain.interfaces import IFileServer
from ..domain.models import BindFailedError, NoPortAvailableError, ServerInfo
from .http_handler import AssetRequestHandler

logger = logging.getLogger(__name__)

PORT_TAKEN_ERRNOS = {errno.EADDRINUSE, errno.EACCES, getattr(errno, "WSAEADDRINUSE", errno.EADDRINUSE)}


class _LoopbackHTTPServer(http.server.HTTPServer):
    # Windows SO_REUSEADDR would let two listeners share one port
    allow_reuse_address = os.name != "nt"


class LocalHttpServer(IFileServer):
    """
    Single-threaded HTTP listener on loopback.
    Requests are handled one at a time on one background thread.
    """

    def __init__(self, host: str = settings.SERVER_HOST):
        self.host = host
        self.info: Optional[ServerInfo] = None
        self._httpd: Optional[http.server.HTTPServer] = None
        self._thread: Optional[threading.Thread] = None

    def start(self, base_path: Path, ports: Iterable[int]) -> ServerInfo:
        if self.is_running():
            raise RuntimeError(f"Server already running on port {self.info.port}")

        handler = functools.partial(AssetRequestHandler, base_path=base_path)
        httpd = self._bind_first_free(ports, handler)
        port = httpd.server_address[1]

        self._httpd = httpd
        self._thread = threading.Thread(
            target=httpd.serve_forever,
            name=f"figurekit-file-server-{port}",
            daemon=True,
        )
        self._thread.start()

        self.info = ServerInfo(host=self.host, port=port, base_path=base_path)
        logger.info(f"File server started: {self.info.url} -> {base_path}")
        return self.info

    def stop(self) -> None:
        if self._httpd is None:
            return

        logger.info(f"Stopping file server on port {self.info.port}")
        self._httpd.shutdown()
        self._httpd.server_close()
        if self._thread is not None:
            self._thread.join()

        self._httpd = None
        self._thread = None
        self.info = None

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _bind_first_free(self, ports: Iterable[int], handler) -> http.server.HTTPServer:
        tried = 0
        for port in ports:
            tried += 1
            try:
                return _LoopbackHTTPServer((self.host, port), handler)
            except OSError as e:
                if e.errno in PORT_TAKEN_ERRNOS:
                    logger.debug(f"Port {port} unavailable: {e}")
                    continue
                logger.error(f"Failed to bind {self.host}:{port}: {e}")
                raise BindFailedError(f"Failed to bind {self.host}:{port}: {e}") from e

        logger.error(f"No free port among {tried} candidates")
        raise NoPortAvailableError(f"No free port available ({tried} ports tried)")
