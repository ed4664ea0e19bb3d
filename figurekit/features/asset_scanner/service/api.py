from pathlib import Path
from typing import List
from ..domain.models import ScanRequest, ScanResult
from .scanner import AssetScanner

def scan_directory(root_dir: str) -> ScanResult:
    """
    Full scan report for `root_dir` (assets, categories, exclusions, errors).
    """
    request = ScanRequest(root_path=Path(root_dir))
    return AssetScanner().scan(request)

def scan_assets(root_dir: str) -> List[str]:
    """
    Public Service API: list the discoverable assets under a directory.

    Returns:
        Slash-separated paths relative to `root_dir`, depth-first,
        manifests before media within each directory.

    Raises:
        FileNotFoundError: If `root_dir` does not exist.
        NotADirectoryError: If `root_dir` is not a directory.
        OSError: If `root_dir` itself cannot be listed.
    """
    return scan_directory(root_dir).paths
