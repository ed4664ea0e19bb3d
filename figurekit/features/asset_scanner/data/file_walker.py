import os
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple
from figurekit.core.common.file_types import JSON_EXTENSIONS, JSONL_EXTENSIONS, get_extension
from ..domain.interfaces import IFileWalker

MANIFEST_EXTENSIONS = JSON_EXTENSIONS | JSONL_EXTENSIONS


class ManifestFirstWalker(IFileWalker):
    """
    Depth-first walk over an explicit stack of directory iterators.
    Siblings are ordered so `.json`/`.jsonl` files are visited before
    anything else in the same directory; the rest follow by name.
    Symlinked directories are not descended into.
    """

    def walk(
        self,
        root: Path,
        on_error: Optional[Callable[[Path, OSError], None]] = None,
    ) -> Iterator[Path]:
        stack = [iter(self._ordered_children(root))]

        while stack:
            try:
                entry = next(stack[-1])
            except StopIteration:
                stack.pop()
                continue

            if entry.is_dir(follow_symlinks=False):
                try:
                    children = self._ordered_children(Path(entry.path))
                except OSError as e:
                    if on_error is not None:
                        on_error(Path(entry.path), e)
                    continue
                stack.append(iter(children))
            elif entry.is_file():
                yield Path(entry.path)

    @staticmethod
    def _ordered_children(directory: Path) -> List[os.DirEntry]:
        with os.scandir(directory) as it:
            entries = list(it)
        entries.sort(key=ManifestFirstWalker._sort_key)
        return entries

    @staticmethod
    def _sort_key(entry: os.DirEntry) -> Tuple[int, str]:
        try:
            is_manifest = entry.is_file() and get_extension(entry.name) in MANIFEST_EXTENSIONS
        except OSError:
            is_manifest = False
        return (0 if is_manifest else 1, entry.name)
