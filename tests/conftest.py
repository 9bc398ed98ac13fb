"""
Test configuration and fixtures for ollama supervisor tests.
"""
import json
import shutil
import socket
import tempfile
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import pytest

from ollama_supervisor.frameworks_drivers.config import Config, ModelHostConfig

@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "ollama": {
            "binary": "/opt/ollama/bin/ollama",
            "host": "127.0.0.1",
            "port": 11500,
            "probe_timeout": 1.5,
            "warmup_delay": 0.5,
            "request_timeout": 10.0
        },
        "server": {
            "host": "127.0.0.1",
            "port": 9100
        }
    }


@pytest.fixture
def config_file(temp_dir, sample_config_data):
    """Create a temporary config file."""
    config_path = temp_dir / "config.json"
    with open(config_path, 'w') as f:
        json.dump(sample_config_data, f, indent=2)
    return str(config_path)


@pytest.fixture
def sample_config(sample_config_data):
    """Create a Config instance from sample data."""
    return Config(**sample_config_data)


@pytest.fixture
def sample_tags_response():
    """Sample GET /api/tags body as returned by the host."""
    return {
        "models": [
            {
                "name": "llama3:8b",
                "size": 4661224676,
                "modified_at": "2024-05-20T10:15:30.123456789+02:00"
            },
            {
                "name": "mistral:7b",
                "size": 4109865159,
                "modified_at": "2024-04-02T08:00:00Z"
            }
        ]
    }


@pytest.fixture
def unused_port():
    """A local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class _TagsHandler(BaseHTTPRequestHandler):
    def do_GET(self):
        state = self.server.state
        state["requests"].append(self.path)
        body = state["body"]
        payload = body.encode() if isinstance(body, str) else json.dumps(body).encode()
        self.send_response(state["status"])
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format, *args):
        pass


@pytest.fixture
def tags_server():
    """
    A local stand-in for the host's control endpoint.

    Set `server.state["status"]` and `server.state["body"]` to shape responses;
    every request path is recorded in `server.state["requests"]`.
    """
    server = ThreadingHTTPServer(("127.0.0.1", 0), _TagsHandler)
    server.state = {"status": 200, "body": {"models": []}, "requests": []}
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()
    thread.join(timeout=5)


@pytest.fixture
def tags_server_config(tags_server):
    """Model host configuration pointing at the local stand-in."""
    return ModelHostConfig(host="127.0.0.1", port=tags_server.server_address[1], probe_timeout=2.0, warmup_delay=0.0)


@pytest.fixture
def refusing_proxy_env(monkeypatch, unused_port):
    """Route environment-configured HTTP traffic to a proxy that refuses every connection."""
    proxy_url = f"http://127.0.0.1:{unused_port}"
    for var in ("HTTP_PROXY", "http_proxy", "ALL_PROXY", "all_proxy"):
        monkeypatch.setenv(var, proxy_url)
    for var in ("NO_PROXY", "no_proxy"):
        monkeypatch.delenv(var, raising=False)
    return proxy_url


FAKE_HOST_SCRIPT = """#!/bin/sh
case "$1" in
    --version)
        echo "ollama version is 0.0.0-test"
        exit 0
        ;;
    serve)
        exit 0
        ;;
    pull)
        if [ "$2" = "llama3" ]; then
            echo "success"
            exit 0
        fi
        echo "Error: pull model manifest: file does not exist: model not found" >&2
        exit 1
        ;;
esac
echo "unknown command: $1" >&2
exit 2
"""


@pytest.fixture
def fake_host_binary(temp_dir):
    """
    Executable shell script standing in for the host binary.

    `--version` and `serve` exit 0, `pull llama3` succeeds and pulling any other
    model fails with "model not found" on stderr. POSIX only.
    """
    script = temp_dir / "ollama"
    script.write_text(FAKE_HOST_SCRIPT)
    script.chmod(0o755)
    return str(script)
