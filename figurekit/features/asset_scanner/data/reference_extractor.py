import logging
import os
from pathlib import Path
from typing import Any, Iterable, Optional, Set
from figurekit.core.common.enums import ManifestKind
from figurekit.core.manifests.parser import load_json_object
from figurekit.core.manifests.types import ManifestDocument
from figurekit.core.shared_types import AssetPath
from ..domain.interfaces import IReferenceExtractor

logger = logging.getLogger(__name__)


class ManifestReferenceExtractor(IReferenceExtractor):
    """
    Resolves the files each known manifest schema points at.
    One instance is bound to one scan root.
    """

    def __init__(self, root: Path):
        self.root = Path(os.path.abspath(root))

    def extract(self, document: ManifestDocument) -> Set[AssetPath]:
        handlers = {
            ManifestKind.AGGREGATE_JSON_LINES: self._from_aggregate,
            ManifestKind.RIGGED_MODEL_V2: self._from_rigged_v2,
            ManifestKind.RIGGED_MODEL_V3V4: self._from_rigged_v3v4,
            ManifestKind.LAYERED_COMPOSITE: self._from_layered_composite,
        }
        handler = handlers.get(document.kind)
        if handler is None:
            return set()
        return handler(document)

    # --- Schema handlers ---

    def _from_aggregate(self, document: ManifestDocument) -> Set[AssetPath]:
        refs = set()
        manifest_dir = self._abs_dir(document)

        for record in document.records:
            sub_path = record.get("path")
            if not isinstance(sub_path, str) or not sub_path:
                continue

            sub_path = sub_path.replace("\\", "/")
            self._add(refs, manifest_dir, sub_path)

            # Textures of the sub-model are relative to the sub-model itself
            sub_model = Path(os.path.normpath(manifest_dir / sub_path))
            if not sub_model.is_file():
                continue
            try:
                sub_data = load_json_object(sub_model)
            except OSError as e:
                logger.warning(f"Could not read sub-model {sub_model}: {e}")
                continue
            if sub_data is None:
                continue
            self._add_all(refs, sub_model.parent, self._as_list(sub_data.get("textures")))

        return refs

    def _from_rigged_v2(self, document: ManifestDocument) -> Set[AssetPath]:
        refs = set()
        self._add_all(refs, self._abs_dir(document), self._as_list(document.data.get("textures")))
        return refs

    def _from_rigged_v3v4(self, document: ManifestDocument) -> Set[AssetPath]:
        refs = set()
        file_refs = document.data.get("FileReferences")
        if not isinstance(file_refs, dict):
            return refs

        manifest_dir = self._abs_dir(document)
        self._add_all(refs, manifest_dir, self._as_list(file_refs.get("Textures")))
        for key in ("Physics", "DisplayInfo", "Moc"):
            self._add(refs, manifest_dir, file_refs.get(key))
        return refs

    def _from_layered_composite(self, document: ManifestDocument) -> Set[AssetPath]:
        refs = set()
        assets = document.data.get("assets")
        if not isinstance(assets, dict):
            return refs

        manifest_dir = self._abs_dir(document)
        for layer in self._as_list(assets.get("layers")):
            if isinstance(layer, dict):
                self._add(refs, manifest_dir, layer.get("path"))
        return refs

    # --- Helpers ---

    def _abs_dir(self, document: ManifestDocument) -> Path:
        return Path(os.path.abspath(document.directory))

    def _add_all(self, refs: Set[AssetPath], base_dir: Path, values: Iterable[Any]) -> None:
        for value in values:
            self._add(refs, base_dir, value)

    def _add(self, refs: Set[AssetPath], base_dir: Path, value: Any) -> None:
        asset = self._resolve(base_dir, value)
        if asset is not None:
            refs.add(asset)

    def _resolve(self, base_dir: Path, value: Any) -> Optional[AssetPath]:
        if not isinstance(value, str) or not value.strip():
            return None
        resolved = AssetPath.from_path(self.root, base_dir / value.replace("\\", "/"))
        if resolved is None:
            logger.debug(f"Dropping reference outside scan root: {value} (from {base_dir})")
        return resolved

    @staticmethod
    def _as_list(value: Any) -> list:
        return value if isinstance(value, list) else []
