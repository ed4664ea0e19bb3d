from pathlib import Path
from typing import Union

OCTET_STREAM = "application/octet-stream"

MIME_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "bmp": "image/bmp",
    "webm": "video/webm",
    "json": "application/json",
    "jsonl": "application/x-ndjson",
    # Rig binaries: model, physics, motion and expression data
    "moc": OCTET_STREAM,
    "moc3": OCTET_STREAM,
    "physics": OCTET_STREAM,
    "physics3": OCTET_STREAM,
    "motion": OCTET_STREAM,
    "motion3": OCTET_STREAM,
    "mtn": OCTET_STREAM,
    "expression": OCTET_STREAM,
    "exp": OCTET_STREAM,
    "exp3": OCTET_STREAM,
}


def guess_mime_type(path: Union[str, Path]) -> str:
    """
    Content type for a file, decided by its extension alone.
    Unknown or missing extensions are served as octet-stream.
    """
    ext = Path(path).suffix.lower().lstrip(".")
    return MIME_TYPES.get(ext, OCTET_STREAM)
