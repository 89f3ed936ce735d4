import json
import re

from fastapi.testclient import TestClient

from app import DEFAULTS_KEY, app, get_redis_client
from lorem_words import DICTIONARY


class FakeRedis:
    def __init__(self, data):
        self.data = data

    def get(self, key):
        return self.data.get(key)


def override_redis(data):
    fake = FakeRedis(data)
    app.dependency_overrides[get_redis_client] = lambda: fake
    return fake


def test_lorem_returns_seeded_content():
    override_redis({})

    client = TestClient(app)
    body = {"shape": "title", "length": 4, "seed": 42}
    first = client.post("/lorem", json=body)
    second = client.post("/lorem", json=body)

    assert first.status_code == 200
    payload = first.json()
    assert payload["shape"] == "title"
    assert payload["seed"] == 42
    assert len(payload["content"].split(" ")) == 4
    assert payload == second.json()


def test_lorem_uses_redis_defaults():
    override_redis({DEFAULTS_KEY: json.dumps({"shape": "ul", "length": "4-4", "wordsPerUnit": 2})})

    client = TestClient(app)
    response = client.post("/lorem", json={})

    assert response.status_code == 200
    payload = response.json()
    assert payload["shape"] == "unordered-list"
    items = re.findall(r"<li>(.*?)</li>", payload["content"])
    assert len(items) == 4
    assert all(len(item.split(" ")) == 2 for item in items)


def test_request_overrides_redis_defaults():
    override_redis({DEFAULTS_KEY: json.dumps({"shape": "ul", "length": "4-4"})})

    client = TestClient(app)
    response = client.post("/lorem", json={"shape": "ol", "length": 2})

    assert response.status_code == 200
    content = response.json()["content"]
    assert content.startswith("<ol>")
    assert content.count("<li>") == 2


def test_malformed_defaults_are_ignored():
    override_redis({DEFAULTS_KEY: "not json"})

    client = TestClient(app)
    response = client.post("/lorem", json={"seed": 3})

    assert response.status_code == 200
    payload = response.json()
    assert payload["shape"] == "paragraph"
    assert payload["content"].startswith("<p>")


def test_inverted_range_is_rejected():
    override_redis({})

    client = TestClient(app)
    response = client.post("/lorem", json={"shape": "sentence", "length": "5-3"})

    assert response.status_code == 422
    assert "5-3" in response.json()["detail"]


def test_bad_default_seed_is_rejected():
    override_redis({DEFAULTS_KEY: json.dumps({"seed": "abc"})})

    client = TestClient(app)
    response = client.post("/lorem", json={"shape": "title"})

    assert response.status_code == 422


def test_default_seed_beyond_float_range_is_rejected():
    override_redis({DEFAULTS_KEY: json.dumps({"seed": 10**400})})

    client = TestClient(app)
    response = client.post("/lorem", json={"shape": "title"})

    assert response.status_code == 422
    assert "seed" in response.json()["detail"]


def test_unknown_shape_is_rejected():
    override_redis({})

    client = TestClient(app)
    response = client.post("/lorem", json={"shape": "table"})

    assert response.status_code == 422


def test_shapes_and_health():
    client = TestClient(app)

    shapes = client.get("/lorem/shapes").json()["shapes"]
    assert "definition-list" in shapes
    assert len(shapes) == 7

    health = client.get("/healthz").json()
    assert health == {"status": "ok", "words": len(DICTIONARY)}
