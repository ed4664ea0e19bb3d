# File: tests/conftest.py

import pytest
import os
import sys
import socket
import json
import logging

# 1. Add project root to path
sys.path.append(os.getcwd())

from figurekit.features.file_server.service.session import ServerSession


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Keeps request-level server logs out of the test output.
    """
    logging.getLogger("figurekit.features.file_server.data.http_handler").setLevel(logging.WARNING)
    yield


@pytest.fixture(scope="function", autouse=True)
def clean_server_session():
    """
    Runs around EVERY test.
    No listener may leak from one test into the next.
    """
    ServerSession().stop()
    yield
    ServerSession().stop()


@pytest.fixture
def free_port():
    """
    A port the OS just reported as free on loopback.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(("127.0.0.1", 0))
        return s.getsockname()[1]


@pytest.fixture
def write_json(tmp_path):
    """
    Writes a JSON document (dict/list) or raw text under tmp_path, creating parents.
    """
    def _write(relative: str, content):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def touch(tmp_path):
    """
    Creates a small binary file under tmp_path, creating parents.
    """
    def _touch(relative: str, content: bytes = b"FAKE_BYTES"):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        return path

    return _touch
