import logging
import os
from pathlib import Path
from typing import List, Tuple
from figurekit.core.common.enums import ManifestKind
from figurekit.core.common.file_types import detect_file_category, get_extension, is_media_file
from figurekit.core.manifests.parser import parse_manifest
from figurekit.core.shared_types import AssetPath

from ..domain.models import ScanRequest, ScanResult, ScannedAsset
from ..data.file_walker import ManifestFirstWalker
from ..data.reference_extractor import ManifestReferenceExtractor

logger = logging.getLogger(__name__)

class AssetScanner:
    """
    Service that lists the top-level assets of a directory tree.

    Files referenced by a manifest (textures, physics, sub-models, layers)
    are sub-resources of that manifest and are left out of the listing.
    """

    def __init__(self):
        self.walker = ManifestFirstWalker()

    def scan(self, request: ScanRequest) -> ScanResult:
        root = Path(os.path.abspath(request.root_path))
        result = ScanResult(root_path=root)
        extractor = ManifestReferenceExtractor(root)

        # (path, always_listed) in traversal order
        candidates: List[Tuple[AssetPath, bool]] = []
        exclusions = set()

        def record_walk_error(path: Path, error: OSError) -> None:
            error_msg = f"Cannot list {path}: {error}"
            logger.warning(error_msg)
            result.errors.append(error_msg)

        logger.info(f"Starting asset scan of: {root}")

        # Phase 1: walk everything, collecting candidates and exclusions
        for file_path in self.walker.walk(root, on_error=record_walk_error):
            result.files_found += 1

            relative = AssetPath.from_path(root, file_path)
            if relative is None:
                result.files_ignored += 1
                continue

            ext = get_extension(file_path)

            try:
                if ext == "jsonl" or ext == "json":
                    document = parse_manifest(file_path)
                    if not document.is_recognized:
                        result.files_ignored += 1
                        continue

                    exclusions |= extractor.extract(document)
                    # An aggregate is never excluded by another manifest
                    always_listed = document.kind == ManifestKind.AGGREGATE_JSON_LINES
                    candidates.append((relative, always_listed))

                elif is_media_file(file_path):
                    candidates.append((relative, False))

                else:
                    result.files_ignored += 1

            except OSError as e:
                error_msg = f"Failed to read {relative}: {e}"
                logger.warning(error_msg)
                result.errors.append(error_msg)

        # Phase 2: emit in traversal order, now that every exclusion is known
        for relative, always_listed in candidates:
            if not always_listed and relative in exclusions:
                continue
            result.assets.append(ScannedAsset(path=relative, category=detect_file_category(relative.value)))

        result.excluded = exclusions

        logger.info(
            f"Scan complete. Listed {len(result.assets)} assets from {result.files_found} files "
            f"({len(exclusions)} referenced paths excluded)."
        )
        return result
