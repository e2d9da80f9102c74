"""
Tests for the HTTP API
"""

import pytest
from fastapi.testclient import TestClient
from py2cairo import __version__
from py2cairo.server.app import app


SOURCE = '''
class Counter:
    balance: int

    @view
    def get_balance(self) -> int:
        return self.balance
'''


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": __version__}


def test_transpile(client):
    response = client.post("/api/transpile", json={"source": SOURCE})

    data = response.json()
    assert response.status_code == 200
    assert data["success"] is True
    assert data["error"] is None
    assert "mod Counter {" in data["cairo_source"]
    assert data["contract"]["storage"] == [{"name": "balance", "type": "felt252"}]
    assert data["contract"]["functions"][0]["classification"] == "view"


def test_transpile_strict_failure(client):
    source = "class C:\n    @view\n    def one(self) -> int:\n        return 1\n"

    lenient = client.post("/api/transpile", json={"source": source}).json()
    assert lenient["success"] is True

    strict = client.post("/api/transpile", json={"source": source, "strict": True}).json()
    assert strict["success"] is False
    assert "one" in strict["error"]
    assert strict["cairo_source"] is None


def test_transpile_syntax_error(client):
    data = client.post("/api/transpile", json={"source": "class (:"}).json()

    assert data["success"] is False
    assert data["error"]


def test_transpile_file(client, tmp_path):
    path = tmp_path / "counter.py"
    path.write_text(SOURCE, encoding="utf-8")

    data = client.post("/api/transpile-file", json={"file_path": str(path)}).json()

    assert data["success"] is True
    assert "self.balance.read()" in data["cairo_source"]


def test_transpile_missing_file(client, tmp_path):
    response = client.post("/api/transpile-file", json={"file_path": str(tmp_path / "nope.py")})

    assert response.status_code == 404
    assert response.json()["detail"] == "File not found"


def test_transpile_undecodable_file(client, tmp_path):
    path = tmp_path / "latin1.py"
    path.write_bytes(b"class Counter:\n    balance: int  # \xff\n")

    response = client.post("/api/transpile-file", json={"file_path": str(path)})

    data = response.json()
    assert response.status_code == 200
    assert data["success"] is False
    assert "Could not read" in data["error"]


def test_transpile_directory_path(client, tmp_path):
    data = client.post("/api/transpile-file", json={"file_path": str(tmp_path)}).json()

    assert data["success"] is False
    assert data["cairo_source"] is None


def test_analyze(client):
    data = client.post("/api/analyze", json={"source": SOURCE}).json()

    assert data["success"] is True
    fn = data["contract"]["functions"][0]
    assert fn["name"] == "get_balance"
    assert fn["visibility"] == "external"
    assert fn["instructions"] == [{
        "kind": "read",
        "variable": "balance",
        "expression": None,
        "code": "self.balance.read()"
    }]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
