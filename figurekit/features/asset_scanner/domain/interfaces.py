from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Iterator, Optional, Set
from figurekit.core.manifests.types import ManifestDocument
from figurekit.core.shared_types import AssetPath

class IFileWalker(ABC):
    """
    Contract for traversing a filesystem.
    """
    @abstractmethod
    def walk(
        self,
        root: Path,
        on_error: Optional[Callable[[Path, OSError], None]] = None,
    ) -> Iterator[Path]:
        """
        Yields file paths one by one, depth-first.
        Within each directory, manifest files must come before any other entry.
        Failures to list a sub-directory go to `on_error`; failure to list
        `root` itself propagates.
        """
        pass

class IReferenceExtractor(ABC):
    """
    Contract for finding the files a manifest pulls in.
    """
    @abstractmethod
    def extract(self, document: ManifestDocument) -> Set[AssetPath]:
        """
        Returns every referenced file as a path relative to the scan root.
        References that resolve outside the root are dropped.
        """
        pass
