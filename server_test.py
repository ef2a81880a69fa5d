import json

import pytest

import server
from avltree import AVLTree


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(server, "tree", AVLTree())
    monkeypatch.setitem(server.app.config, "KEY_TYPE", "int")
    server.app.config["TESTING"] = True
    with server.app.test_client() as client:
        yield client

def load(response):
    return json.loads(response.get_data(as_text=True))

def fill(client, *keys):
    for key in keys:
        response = client.post("/set/{}".format(key), data=str(key))
        assert response.status_code == 202


def test_set_get(client):
    response = client.post("/set/6", data="six")
    assert response.status_code == 202
    assert load(response) == {"key": 6, "value": "six"}

    response = client.get("/get/6")
    assert response.status_code == 200
    assert load(response) == {"key": 6, "value": "six"}

def test_get_missing(client):
    response = client.get("/get/6")
    assert response.status_code == 404

def test_set_overwrites(client):
    fill(client, 1)
    client.post("/set/1", data="one")

    assert load(client.get("/get/1"))["value"] == "one"
    assert load(client.get("/size")) == {"size": 1}

def test_bad_int_key(client):
    response = client.post("/set/abc", data="x")
    assert response.status_code == 400
    assert len(server.tree) == 0

def test_non_utf8_value(client):
    response = client.post("/set/1", data=b"\xff\xfe")
    assert response.status_code == 400
    assert "error" in load(response)
    assert len(server.tree) == 0

def test_delete(client):
    fill(client, 6, 2, 8)

    response = client.post("/delete/6")
    assert response.status_code == 202
    assert client.get("/get/6").status_code == 404

    response = client.post("/delete/6")
    assert response.status_code == 404

def test_min_max(client):
    assert client.get("/min").status_code == 404
    assert client.get("/max").status_code == 404

    fill(client, 6, 2, 8, 1, 4, 3)
    assert load(client.get("/min")) == {"key": 1, "value": "1"}
    assert load(client.get("/max")) == {"key": 8, "value": "8"}

def test_height_and_balanced(client):
    assert load(client.get("/height")) == {"height": -1}
    assert load(client.get("/balanced")) == {"balanced": True}

    fill(client, 6, 2, 8, 1, 4, 3)
    assert load(client.get("/height")) == {"height": 2}
    assert load(client.get("/balanced")) == {"balanced": True}

def test_traverse(client):
    fill(client, 6, 2, 8, 1, 4, 3)

    inorder = load(client.get("/traverse/inorder"))
    assert [key for key, value in inorder] == [1, 2, 3, 4, 6, 8]

    breadth_first = load(client.get("/traverse/breadth_first"))
    assert [key for key, value in breadth_first] == [4, 2, 6, 1, 3, 8]

def test_traverse_unknown_order(client):
    response = client.get("/traverse/sideways")
    assert response.status_code == 400

def test_between(client):
    fill(client, *range(10))

    items = load(client.get("/between/3/5"))
    assert items == [[3, "3"], [4, "4"], [5, "5"]]

def test_string_keys(client, monkeypatch):
    monkeypatch.setitem(server.app.config, "KEY_TYPE", "str")
    client.post("/set/bob", data="1")
    client.post("/set/alice", data="2")

    assert load(client.get("/dump")) == [["alice", "2"], ["bob", "1"]]

def test_ping(client):
    fill(client, 1, 2, 3)
    response = client.post("/ping")
    assert response.get_data(as_text=True) == "3"
