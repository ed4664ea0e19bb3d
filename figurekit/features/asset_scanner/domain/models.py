from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Set
from figurekit.core.common.enums import FileCategory
from figurekit.core.shared_types import AssetPath

@dataclass(frozen=True)
class ScanRequest:
    """
    User intent to list the discoverable assets under a directory.
    """
    root_path: Path

    def __post_init__(self):
        if not self.root_path.exists():
            raise FileNotFoundError(f"Scan root not found: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Scan root is not a directory: {self.root_path}")

@dataclass(frozen=True)
class ScannedAsset:
    path: AssetPath
    category: FileCategory

@dataclass
class ScanResult:
    """
    Report returned after scanning completes.
    `assets` is in traversal order and never holds an excluded path.
    """
    root_path: Path
    assets: List[ScannedAsset] = field(default_factory=list)
    excluded: Set[AssetPath] = field(default_factory=set)
    files_found: int = 0
    files_ignored: int = 0
    errors: List[str] = field(default_factory=list)

    @property
    def paths(self) -> List[str]:
        return [asset.path.value for asset in self.assets]
