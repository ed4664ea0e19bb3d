import os
from pathlib import Path
from urllib.parse import unquote


def resolve_request_path(base_path: Path, raw_url: str) -> Path:
    """
    Maps a request target such as `/figure/%E6%B5%8B%E8%AF%95.png?v=2`
    onto an absolute path under `base_path`.

    Never fails; whether the file exists is for the caller to check.
    """
    # 1. Drop the query string
    path_part = raw_url.split("?", 1)[0]

    # 2. Percent-decode, keeping the raw text when it is not valid UTF-8
    try:
        decoded = unquote(path_part, errors="strict")
    except UnicodeDecodeError:
        decoded = path_part

    # 3. Make it relative so the join stays under base_path
    relative = decoded.lstrip("/\\")

    return Path(os.path.abspath(os.path.join(base_path, relative)))
