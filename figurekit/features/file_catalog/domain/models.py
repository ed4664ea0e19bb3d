from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class FileInfo:
    """
    Filesystem facts about one path, as shown in the file browser.
    """
    name: str
    path: str
    size: int
    is_directory: bool
    extension: Optional[str]
    is_image: bool
