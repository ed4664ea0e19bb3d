# File: figurekit/core/common/file_types.py

from pathlib import Path
from typing import Union
from .enums import FileCategory

IMAGE_EXTENSIONS = {"png", "jpg", "jpeg", "bmp", "webp"}
GIF_EXTENSIONS = {"gif"}
VIDEO_EXTENSIONS = {"webm"}
JSON_EXTENSIONS = {"json"}
JSONL_EXTENSIONS = {"jsonl"}

# Files the scanner may list as stand-alone assets
MEDIA_EXTENSIONS = IMAGE_EXTENSIONS | GIF_EXTENSIONS | VIDEO_EXTENSIONS


def get_extension(path: Union[str, Path]) -> str:
    """
    Lower-case extension without the dot, or "" when there is none.
    """
    return Path(path).suffix.lower().lstrip(".")


def detect_file_category(path: Union[str, Path]) -> FileCategory:
    ext = get_extension(path)

    if ext in GIF_EXTENSIONS:
        return FileCategory.GIF
    if ext in VIDEO_EXTENSIONS:
        return FileCategory.VIDEO_WEBM
    if ext in JSONL_EXTENSIONS:
        return FileCategory.MODEL_JSONL
    if ext in JSON_EXTENSIONS:
        return FileCategory.MODEL_JSON
    if ext in IMAGE_EXTENSIONS:
        return FileCategory.IMAGE

    return FileCategory.UNKNOWN


def is_media_file(path: Union[str, Path]) -> bool:
    return get_extension(path) in MEDIA_EXTENSIONS


def is_image_file(path: Union[str, Path]) -> bool:
    """Static images and GIFs."""
    return detect_file_category(path) in (FileCategory.IMAGE, FileCategory.GIF)
