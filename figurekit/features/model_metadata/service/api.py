from pathlib import Path
from ..data.metadata_reader import RigMetadataReader
from ..domain.models import ModelMetadata

def extract_motions_expressions(file_path: str) -> ModelMetadata:
    """
    Public Service API: motion groups and expressions of a rig manifest
    (`.json` model or `.jsonl` aggregate).
    Unknown, missing or unreadable files yield empty lists.
    """
    return RigMetadataReader().read(Path(file_path))
