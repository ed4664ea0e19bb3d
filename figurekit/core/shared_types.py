import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

@dataclass(frozen=True, order=True)
class AssetPath:
    """
    Value Object for a file location relative to a scan root.
    Always forward-slash separated and never absolute.
    """
    value: str

    def __post_init__(self):
        if not self.value or self.value.strip() in (".", ""):
            raise ValueError("Asset path cannot be empty.")
        if "\\" in self.value:
            raise ValueError(f"Asset path must use forward slashes: {self.value}")
        if self.value.startswith("/"):
            raise ValueError(f"Asset path must be relative: {self.value}")
        if self.value == ".." or self.value.startswith("../"):
            raise ValueError(f"Asset path escapes its root: {self.value}")

    @classmethod
    def from_path(cls, root: Path, path: Union[str, Path]) -> Optional["AssetPath"]:
        """
        Builds the root-relative form of `path`.
        Returns None when the path normalises to a location outside `root`.
        """
        root_abs = os.path.normpath(os.path.abspath(root))
        target_abs = os.path.normpath(os.path.join(root_abs, path))

        try:
            relative = os.path.relpath(target_abs, root_abs)
        except ValueError:
            # Different drive on Windows
            return None

        if relative == "." or relative == ".." or relative.startswith(".." + os.sep):
            return None

        return cls(relative.replace(os.sep, "/").replace("\\", "/"))

    def __str__(self) -> str:
        return self.value
