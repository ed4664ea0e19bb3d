import logging
import os
from pathlib import Path
from typing import Any, Optional, Set
from figurekit.core.common.enums import ManifestKind
from figurekit.core.manifests.parser import parse_manifest
from figurekit.core.manifests.types import ManifestDocument
from ..domain.models import ModelMetadata

logger = logging.getLogger(__name__)


class RigMetadataReader:
    """
    Reads motion and expression names out of rig manifests.
    Aggregates are followed into their sub-models; each file is read once.
    """

    def read(self, path: Path) -> ModelMetadata:
        return self._read(Path(os.path.abspath(path)), visited=set())

    def _read(self, path: Path, visited: Set[Path]) -> ModelMetadata:
        metadata = ModelMetadata()
        if path in visited or not path.is_file():
            return metadata
        visited.add(path)

        try:
            document = parse_manifest(path)
        except OSError as e:
            logger.warning(f"Could not read manifest {path}: {e}")
            return metadata

        if document.kind == ManifestKind.RIGGED_MODEL_V2:
            self._collect_v2(document, metadata)
        elif document.kind == ManifestKind.RIGGED_MODEL_V3V4:
            self._collect_v3v4(document, metadata)
        elif document.kind == ManifestKind.AGGREGATE_JSON_LINES:
            self._collect_aggregate(document, metadata, visited)

        return metadata

    def _collect_v2(self, document: ManifestDocument, metadata: ModelMetadata) -> None:
        motions = document.data.get("motions")
        if isinstance(motions, dict):
            for group in motions:
                metadata.add_motion(group)

        for entry in self._as_list(document.data.get("expressions")):
            metadata.add_expression(self._expression_name(entry, "name", "file"))

    def _collect_v3v4(self, document: ManifestDocument, metadata: ModelMetadata) -> None:
        file_refs = document.data.get("FileReferences")
        if not isinstance(file_refs, dict):
            return

        motions = file_refs.get("Motions")
        if isinstance(motions, dict):
            for group in motions:
                metadata.add_motion(group)

        for entry in self._as_list(file_refs.get("Expressions")):
            metadata.add_expression(self._expression_name(entry, "Name", "File"))

    def _collect_aggregate(self, document: ManifestDocument, metadata: ModelMetadata, visited: Set[Path]) -> None:
        for record in document.records:
            for name in self._as_list(record.get("motions")):
                metadata.add_motion(name)
            for name in self._as_list(record.get("expressions")):
                metadata.add_expression(name)

            sub_path = record.get("path")
            if isinstance(sub_path, str) and sub_path:
                sub_model = Path(os.path.normpath(document.directory / sub_path.replace("\\", "/")))
                metadata.merge(self._read(sub_model, visited))

    @staticmethod
    def _expression_name(entry: Any, name_key: str, file_key: str) -> Optional[str]:
        if not isinstance(entry, dict):
            return None
        name = entry.get(name_key)
        if isinstance(name, str) and name:
            return name
        file_name = entry.get(file_key)
        if isinstance(file_name, str) and file_name:
            # "exp/smile.exp3.json" -> "smile"
            return Path(file_name.replace("\\", "/")).name.split(".")[0]
        return None

    @staticmethod
    def _as_list(value: Any) -> list:
        return value if isinstance(value, list) else []
