from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable
from .models import ServerInfo

class IFileServer(ABC):
    """
    Contract for a background HTTP listener exposing one directory.
    """

    @abstractmethod
    def start(self, base_path: Path, ports: Iterable[int]) -> ServerInfo:
        """
        Binds the first free port out of `ports` and starts serving `base_path`.

        Raises:
            NoPortAvailableError: If every candidate port is taken.
            BindFailedError: If binding fails for any other reason.
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stops serving and releases the listening socket."""
        pass

    @abstractmethod
    def is_running(self) -> bool:
        pass
