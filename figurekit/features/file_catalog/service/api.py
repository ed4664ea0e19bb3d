from pathlib import Path
from typing import List
from ..data.local_fs import LocalFileCatalog
from ..domain.models import FileInfo

catalog = LocalFileCatalog()

def get_file_info(file_path: str) -> FileInfo:
    """
    Raises:
        FileNotFoundError: If the path does not exist.
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    return catalog.describe(path)

def file_exists(file_path: str) -> bool:
    return bool(file_path) and Path(file_path).exists()

def batch_file_exists(file_paths: List[str]) -> List[bool]:
    """Existence of each path, in the same order."""
    return [file_exists(p) for p in file_paths]

def list_image_files(dir_path: str) -> List[FileInfo]:
    return catalog.list_images(Path(dir_path))

def search_image_files(dir_path: str, pattern: str) -> List[FileInfo]:
    """
    Recursive, case-insensitive name search restricted to image files.
    """
    return catalog.search_images(Path(dir_path), pattern)
