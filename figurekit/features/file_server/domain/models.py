from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class ServerInfo:
    """
    Where an active file server listens and what it serves.
    """
    host: str
    port: int
    base_path: Path

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

class NoPortAvailableError(RuntimeError):
    """Every port in the candidate range is taken."""

class BindFailedError(RuntimeError):
    """The listener could not be bound for a reason other than the port being taken."""
