# File: figurekit/features/file_server/service/session.py

import logging
import os
from pathlib import Path
from threading import Lock
from typing import Iterable, Optional

from figurekit.core.config.settings import settings
from ..data.local_server import LocalHttpServer
from ..domain.models import ServerInfo

logger = logging.getLogger(__name__)

class ServerSession:
    """
    Singleton owner of the process-wide file server.
    At most one listener is alive at a time; starting a new one
    shuts the previous one down first.
    """
    _instance = None
    _lock = Lock()

    def __new__(cls):
        with cls._lock:
            if cls._instance is None:
                cls._instance = super(ServerSession, cls).__new__(cls)
                cls._instance._server = None
        return cls._instance

    def start(self, base_path: Path, ports: Optional[Iterable[int]] = None) -> ServerInfo:
        """
        Serve `base_path`. An active server for the same directory is reused.

        Raises:
            NoPortAvailableError: If no candidate port is free.
            BindFailedError: If the listener cannot be bound.
        """
        base_path = Path(os.path.abspath(base_path))
        candidates = ports if ports is not None else settings.SERVER_PORT_CANDIDATES

        with self._lock:
            # 1. Same directory already served? Hand back the existing URL.
            if self._server is not None and self._server.is_running():
                if self._server.info.base_path == base_path:
                    logger.info(f"Reusing file server at {self._server.info.url}")
                    return self._server.info

            # 2. Release the previous listener before binding a new one
            self._stop_locked()

            # 3. Bind and serve
            server = LocalHttpServer()
            info = server.start(base_path, candidates)
            self._server = server
            return info

    def stop(self) -> None:
        with self._lock:
            self._stop_locked()

    def current(self) -> Optional[ServerInfo]:
        with self._lock:
            if self._server is None or not self._server.is_running():
                return None
            return self._server.info

    def _stop_locked(self) -> None:
        if self._server is not None:
            self._server.stop()
            self._server = None
