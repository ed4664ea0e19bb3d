# File: figurekit/core/common/enums.py

from enum import Enum, unique

@unique
class FileCategory(str, Enum):
    IMAGE = "image"
    GIF = "gif"
    VIDEO_WEBM = "video_webm"
    MODEL_JSON = "model_json"
    MODEL_JSONL = "model_jsonl"
    UNKNOWN = "unknown"

@unique
class ManifestKind(str, Enum):
    AGGREGATE_JSON_LINES = "aggregate_json_lines"
    RIGGED_MODEL_V2 = "rigged_model_v2"
    RIGGED_MODEL_V3V4 = "rigged_model_v3v4"
    LAYERED_COMPOSITE = "layered_composite"
    UNRECOGNIZED = "unrecognized"
