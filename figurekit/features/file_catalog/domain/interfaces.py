from abc import ABC, abstractmethod
from pathlib import Path
from typing import List
from .models import FileInfo

class IFileCatalog(ABC):
    @abstractmethod
    def describe(self, path: Path) -> FileInfo:
        """
        Raises:
            FileNotFoundError: If `path` does not exist.
        """
        pass

    @abstractmethod
    def list_images(self, directory: Path) -> List[FileInfo]:
        """Image files directly inside `directory`, sorted by name."""
        pass

    @abstractmethod
    def search_images(self, directory: Path, pattern: str) -> List[FileInfo]:
        """Image files anywhere below `directory` whose name contains `pattern`."""
        pass
