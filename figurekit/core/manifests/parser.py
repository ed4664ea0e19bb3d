# File: figurekit/core/manifests/parser.py

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple
from figurekit.core.common.enums import ManifestKind
from figurekit.core.common.file_types import get_extension
from .types import ManifestDocument

logger = logging.getLogger(__name__)

MODEL_FILENAME_SUFFIXES = (".char.json", "model.json")
RIGGED_V2_KEYS = ("model", "textures", "motions")
COMPOSITE_KEYS = ("settings", "setting", "assets", "controller")


def _looks_like_rigged_v2(file_name: str, data: Dict[str, Any]) -> bool:
    if file_name.lower().endswith(MODEL_FILENAME_SUFFIXES):
        return True
    return any(key in data for key in RIGGED_V2_KEYS)


def _looks_like_rigged_v3v4(file_name: str, data: Dict[str, Any]) -> bool:
    return "Version" in data and "FileReferences" in data


def _looks_like_layered_composite(file_name: str, data: Dict[str, Any]) -> bool:
    return any(key in data for key in COMPOSITE_KEYS)


# Probed in order; the first match wins.
SCHEMA_PROBES: Tuple[Tuple[ManifestKind, Callable[[str, Dict[str, Any]], bool]], ...] = (
    (ManifestKind.RIGGED_MODEL_V2, _looks_like_rigged_v2),
    (ManifestKind.RIGGED_MODEL_V3V4, _looks_like_rigged_v3v4),
    (ManifestKind.LAYERED_COMPOSITE, _looks_like_layered_composite),
)


def classify_manifest(file_name: str, data: Any) -> ManifestKind:
    """
    Detects which descriptor schema a parsed JSON document follows.
    Anything that is not a JSON object is UNRECOGNIZED.
    """
    if not isinstance(data, dict):
        return ManifestKind.UNRECOGNIZED

    for kind, probe in SCHEMA_PROBES:
        if probe(file_name, data):
            return kind

    return ManifestKind.UNRECOGNIZED


def load_json_object(path: Path) -> Optional[Dict[str, Any]]:
    """
    Reads a JSON file and returns its top-level object.
    Malformed or non-object content yields None. Read failures raise OSError.
    """
    raw = path.read_bytes()
    try:
        data = json.loads(raw.decode("utf-8-sig"))
    except (ValueError, RecursionError) as e:
        logger.debug(f"Not valid JSON: {path} ({e})")
        return None

    return data if isinstance(data, dict) else None


def read_json_lines(path: Path) -> List[Dict[str, Any]]:
    """
    Parses a JSONL file line by line.
    Blank, malformed and non-object lines are skipped.
    """
    text = path.read_bytes().decode("utf-8-sig", errors="replace")
    records = []

    for line_no, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            record = json.loads(line)
        except (ValueError, RecursionError):
            logger.debug(f"Skipping malformed line {line_no} in {path.name}")
            continue
        if isinstance(record, dict):
            records.append(record)

    return records


def parse_manifest(path: Path) -> ManifestDocument:
    """
    Reads `path` and tags it with its ManifestKind.

    `.jsonl` files are always AGGREGATE_JSON_LINES; `.json` files go through
    the schema probes; every other extension is UNRECOGNIZED.

    Raises:
        OSError: If the file cannot be read.
    """
    ext = get_extension(path)

    if ext == "jsonl":
        return ManifestDocument(
            path=path,
            kind=ManifestKind.AGGREGATE_JSON_LINES,
            records=read_json_lines(path),
        )

    if ext != "json":
        return ManifestDocument(path=path, kind=ManifestKind.UNRECOGNIZED)

    data = load_json_object(path)
    kind = classify_manifest(path.name, data)

    return ManifestDocument(path=path, kind=kind, data=data or {})
