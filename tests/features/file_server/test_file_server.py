import io
import http.client
import pytest
import urllib.error
import urllib.request
from pathlib import Path
from figurekit.features.file_server.data.http_handler import AssetRequestHandler
from figurekit.features.file_server.data.mime_types import guess_mime_type
from figurekit.features.file_server.data.path_resolver import resolve_request_path
from figurekit.features.file_server.service.api import start_server

# --- MIME Resolver ---

def test_mime_types():
    assert guess_mime_type("a.PNG") == "image/png"
    assert guess_mime_type("a.jpg") == "image/jpeg"
    assert guess_mime_type("a.jpeg") == "image/jpeg"
    assert guess_mime_type("a.webm") == "video/webm"
    assert guess_mime_type("a.json") == "application/json"
    assert guess_mime_type("a.jsonl") == "application/x-ndjson"
    for binary in ("a.moc3", "a.physics3", "a.motion3", "a.mtn", "a.exp3", "a.unknown", "Makefile"):
        assert guess_mime_type(binary) == "application/octet-stream"

# --- Path Resolver ---

def test_resolve_strips_query_and_leading_slash(tmp_path):
    resolved = resolve_request_path(tmp_path, "/figure/a.png?v=123&x=/y")
    assert resolved == tmp_path / "figure" / "a.png"

def test_resolve_percent_decodes(tmp_path):
    resolved = resolve_request_path(tmp_path, "/%E6%B5%8B%E8%AF%95.png")
    assert resolved == tmp_path / "测试.png"

def test_resolve_collapses_repeated_leading_slashes(tmp_path):
    resolved = resolve_request_path(tmp_path, "//a.png")
    assert resolved == tmp_path / "a.png"

def test_resolve_keeps_raw_text_on_invalid_encoding(tmp_path):
    resolved = resolve_request_path(tmp_path, "/bad%FFname.png")
    assert resolved == tmp_path / "bad%FFname.png"

def test_resolve_is_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    resolved = resolve_request_path(Path("base"), "/x.png")
    assert resolved.is_absolute()
    assert resolved == Path.cwd() / "base" / "x.png"

# --- Local Server (integration) ---

def fetch(url: str):
    """Returns (status, headers, body) without raising on 4xx/5xx."""
    try:
        with urllib.request.urlopen(url, timeout=5) as resp:
            return resp.status, resp.headers, resp.read()
    except urllib.error.HTTPError as e:
        return e.code, e.headers, e.read()

@pytest.fixture
def served_dir(tmp_path, free_port):
    root = tmp_path / "figure"
    (root / "hero").mkdir(parents=True)
    (root / "hero" / "face.png").write_bytes(b"\x89PNG\r\n\x1a\nFAKE")
    (root / "测试.png").write_bytes(b"unicode-named")
    (root / "hero" / "hero.moc3").write_bytes(b"MOC3\x00\x01")
    url = start_server(str(root), start_port=free_port, port_range=1)
    return root, url

def test_server_returns_file_bytes_with_cors(served_dir):
    root, url = served_dir

    status, headers, body = fetch(f"{url}/hero/face.png")

    assert status == 200
    assert body == (root / "hero" / "face.png").read_bytes()
    assert headers["Content-Type"] == "image/png"
    assert headers["Access-Control-Allow-Origin"] == "*"
    assert headers["Access-Control-Allow-Methods"] == "GET, POST, OPTIONS"
    assert headers["Access-Control-Allow-Headers"] == "Content-Type"

def test_server_ignores_query_string(served_dir):
    _, url = served_dir

    status, headers, body = fetch(f"{url}/hero/hero.moc3?cache=bust")

    assert status == 200
    assert body == b"MOC3\x00\x01"
    assert headers["Content-Type"] == "application/octet-stream"

def test_server_decodes_url_encoded_paths(served_dir):
    _, url = served_dir

    status, _, body = fetch(f"{url}/%E6%B5%8B%E8%AF%95.png")

    assert status == 200
    assert body == b"unicode-named"

def test_server_404_for_missing_and_directories(served_dir):
    _, url = served_dir

    for target in ("/nope.png", "/hero", "/hero/"):
        status, headers, body = fetch(f"{url}{target}")
        assert status == 404
        assert body == b"File not found"
        assert headers["Access-Control-Allow-Origin"] == "*"

def test_server_handles_options_and_post(served_dir):
    _, url = served_dir

    for method, data in (("OPTIONS", None), ("POST", b"{}")):
        req = urllib.request.Request(f"{url}/hero/face.png", data=data, method=method)
        with urllib.request.urlopen(req, timeout=5) as resp:
            assert resp.status == 200
            assert resp.headers["Access-Control-Allow-Origin"] == "*"

def test_server_survives_many_sequential_requests(served_dir):
    _, url = served_dir

    for _ in range(20):
        status, _, _ = fetch(f"{url}/hero/face.png")
        assert status == 200

def test_server_500_on_read_error(served_dir, monkeypatch):
    """
    A read failure after the existence check becomes a 500 with the error text.
    """
    _, url = served_dir
    original_read_bytes = Path.read_bytes

    def failing_read_bytes(self):
        if self.name == "face.png":
            raise PermissionError(13, "Permission denied")
        return original_read_bytes(self)

    monkeypatch.setattr(Path, "read_bytes", failing_read_bytes)

    status, headers, body = fetch(f"{url}/hero/face.png")

    assert status == 500
    assert body.startswith(b"Internal Server Error: ")
    assert b"Permission denied" in body
    assert headers["Access-Control-Allow-Origin"] == "*"

def test_every_method_is_served_with_cors(served_dir):
    """
    HEAD, PUT and DELETE take the same file-serving path as GET.
    """
    root, url = served_dir
    port = int(url.rsplit(":", 1)[1])

    for method in ("HEAD", "PUT", "DELETE"):
        conn = http.client.HTTPConnection("127.0.0.1", port, timeout=5)
        try:
            conn.request(method, "/hero/face.png")
            resp = conn.getresponse()
            body = resp.read()
        finally:
            conn.close()

        assert resp.status == 200
        assert resp.getheader("Access-Control-Allow-Origin") == "*"
        assert resp.getheader("Content-Length") == str(len((root / "hero" / "face.png").read_bytes()))
        if method == "HEAD":
            assert body == b""
        else:
            assert body == (root / "hero" / "face.png").read_bytes()

def test_protocol_errors_carry_cors():
    """
    Errors raised by request parsing (400, 414, 431, ...) use the same response path.
    """
    handler = AssetRequestHandler.__new__(AssetRequestHandler)
    handler.wfile = io.BytesIO()
    handler.request_version = "HTTP/1.1"
    handler.requestline = "BROKEN"
    handler.command = None
    handler.client_address = ("127.0.0.1", 0)
    handler.close_connection = False

    handler.send_error(400, "Bad request syntax")

    raw = handler.wfile.getvalue()
    head, _, body = raw.partition(b"\r\n\r\n")
    assert head.startswith(b"HTTP/1.1 400")
    assert b"Access-Control-Allow-Origin: *" in head
    assert b"Access-Control-Allow-Methods: GET, POST, OPTIONS" in head
    assert body == b"Bad request syntax"
    assert handler.close_connection
