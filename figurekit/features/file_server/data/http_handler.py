"""
Request handler that serves raw file bytes from one base directory.
"""

import http.server
import logging
from pathlib import Path

from .mime_types import guess_mime_type
from .path_resolver import resolve_request_path

logger = logging.getLogger(__name__)

CORS_HEADERS = (
    ("Access-Control-Allow-Origin", "*"),
    ("Access-Control-Allow-Methods", "GET, POST, OPTIONS"),
    ("Access-Control-Allow-Headers", "Content-Type"),
)


class AssetRequestHandler(http.server.BaseHTTPRequestHandler):
    """
    Every method goes through the same file-serving path.
    Every response, errors included, carries the CORS headers.
    """

    protocol_version = "HTTP/1.1"
    server_version = "figurekit-file-server"

    def __init__(self, *args, base_path=None, **kwargs):
        self._base_path = Path(base_path) if base_path is not None else Path.cwd()
        super().__init__(*args, **kwargs)

    def do_GET(self):
        self._discard_request_body()
        file_path = resolve_request_path(self._base_path, self.path)

        if not file_path.is_file():
            self.send_text(404, "File not found")
            return

        try:
            content = file_path.read_bytes()
        except OSError as e:
            logger.error(f"Failed to read {file_path}: {e}")
            self.send_text(500, f"Internal Server Error: {e}")
            return

        self.send_body(200, content, guess_mime_type(file_path))

    def __getattr__(self, name):
        # Any request method (HEAD, PUT, DELETE, ...) is served like GET
        if name.startswith("do_"):
            return self.do_GET
        raise AttributeError(name)

    def send_error(self, code, message=None, explain=None):
        if message is None:
            message = self.responses.get(code, ("Error",))[0]
        self.send_text(code, message)

    def send_text(self, status: int, message: str):
        self.send_body(status, message.encode("utf-8"), "text/plain; charset=utf-8")

    def send_body(self, status: int, body: bytes, content_type: str):
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        for name, value in CORS_HEADERS:
            self.send_header(name, value)
        # Single-threaded listener: no keep-alive
        self.send_header("Connection", "close")
        self.close_connection = True
        self.end_headers()
        if getattr(self, "command", None) != "HEAD":
            self.wfile.write(body)

    def _discard_request_body(self):
        try:
            length = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            length = 0
        if length > 0:
            self.rfile.read(length)

    def log_message(self, format, *args):
        logger.debug(f"{self.address_string()} - {format % args}")
