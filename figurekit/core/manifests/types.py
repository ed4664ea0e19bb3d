# File: figurekit/core/manifests/types.py

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List
from figurekit.core.common.enums import ManifestKind

@dataclass(frozen=True)
class ManifestDocument:
    """
    A manifest file after schema detection.
    `data` holds the parsed JSON object for single-document kinds;
    `records` holds the parsed lines of an aggregate JSONL file.
    """
    path: Path
    kind: ManifestKind
    data: Dict[str, Any] = field(default_factory=dict)
    records: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def directory(self) -> Path:
        return self.path.parent

    @property
    def is_recognized(self) -> bool:
        return self.kind != ManifestKind.UNRECOGNIZED
