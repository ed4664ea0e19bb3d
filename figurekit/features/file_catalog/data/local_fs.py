import logging
import os
from pathlib import Path
from typing import List
from figurekit.core.common.file_types import get_extension, is_image_file
from ..domain.interfaces import IFileCatalog
from ..domain.models import FileInfo

logger = logging.getLogger(__name__)

class LocalFileCatalog(IFileCatalog):
    def describe(self, path: Path) -> FileInfo:
        stat = path.stat()
        is_directory = path.is_dir()
        ext = get_extension(path)

        return FileInfo(
            name=path.name,
            path=str(path),
            size=0 if is_directory else stat.st_size,
            is_directory=is_directory,
            extension=ext or None,
            is_image=not is_directory and is_image_file(path),
        )

    def list_images(self, directory: Path) -> List[FileInfo]:
        self._require_directory(directory)
        images = [
            self.describe(child)
            for child in sorted(directory.iterdir(), key=lambda p: p.name)
            if child.is_file() and is_image_file(child)
        ]
        return images

    def search_images(self, directory: Path, pattern: str) -> List[FileInfo]:
        self._require_directory(directory)
        needle = pattern.lower()
        matches = []

        def on_error(error: OSError):
            logger.warning(f"Skipping unreadable directory during search: {error}")

        for dirpath, dirnames, filenames in os.walk(directory, onerror=on_error):
            dirnames.sort()
            for filename in sorted(filenames):
                if needle in filename.lower() and is_image_file(filename):
                    matches.append(self.describe(Path(dirpath) / filename))

        return matches

    @staticmethod
    def _require_directory(directory: Path) -> None:
        if not directory.exists():
            raise FileNotFoundError(f"Directory not found: {directory}")
        if not directory.is_dir():
            raise NotADirectoryError(f"Not a directory: {directory}")
