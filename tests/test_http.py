import json
import threading

import httpx
import pytest
from fastapi.testclient import TestClient

from static_responder.main import create_app, create_default_app
from static_responder.routes import build_route_table
from static_responder.server import make_server

USERS = [
    {"id": 1, "username": "anson", "displayname": "Anson"},
    {"id": 2, "username": "john", "displayname": "John"},
    {"id": 3, "username": "adam", "displayname": "Adam"},
]

PRODUCTS = [
    {"id": 1, "name": "Laptop", "price": 999.99},
    {"id": 2, "name": "Smartphone", "price": 499.99},
    {"id": 3, "name": "Headphones", "price": 199.99},
]


@pytest.fixture
def client():
    return TestClient(create_default_app())


@pytest.fixture
def stdlib_url():
    server = make_server(build_route_table(), "127.0.0.1", 0)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    yield f"http://{host}:{port}"
    server.shutdown()
    server.server_close()


def test_root(client):
    resp = client.get("/")
    assert resp.status_code == 201
    assert resp.headers["content-type"].startswith("text/html")
    assert "Hello, World!" in resp.text
    assert '{\n  "msg": "Hello, World!"\n}' in resp.text


def test_users(client):
    resp = client.get("/api/users")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert [u["username"] for u in resp.json()] == ["anson", "john", "adam"]


def test_products(client):
    resp = client.get("/api/products")
    assert resp.status_code == 200
    assert [p["price"] for p in resp.json()] == [999.99, 499.99, 199.99]


@pytest.mark.parametrize("path", ["/does-not-exist", "/api/users/", "/api"])
def test_not_found(client, path):
    resp = client.get(path)
    assert resp.status_code == 404
    assert resp.content == b""


def test_wrong_method_is_not_found(client):
    assert client.post("/api/users").status_code == 404


def test_query_string_is_ignored(client):
    assert client.get("/api/products?sort=price").status_code == 200


def test_create_app_uses_given_table():
    from static_responder import BodyKind, RouteRule, RouteTable

    table = RouteTable()
    table.add(RouteRule(method="PUT", path="/x", status=204, body_kind=BodyKind.TEXT, body=""))
    custom = TestClient(create_app(table))

    assert custom.put("/x").status_code == 204
    assert custom.get("/").status_code == 404


def test_stdlib_root(stdlib_url):
    root = httpx.get(f"{stdlib_url}/")
    assert root.status_code == 201
    assert root.headers["content-type"] == "text/html; charset=utf-8"
    assert "<div>Hello, World!</div>" in root.text
    assert '<pre>{\n  "msg": "Hello, World!"\n}</pre>' in root.text


def test_stdlib_users(stdlib_url):
    users = httpx.get(f"{stdlib_url}/api/users")
    assert users.status_code == 200
    assert users.headers["content-type"] == "application/json; charset=utf-8"
    assert json.loads(users.content) == USERS


def test_stdlib_products(stdlib_url):
    products = httpx.get(f"{stdlib_url}/api/products")
    assert products.status_code == 200
    assert json.loads(products.content) == PRODUCTS


def test_stdlib_not_found(stdlib_url):
    assert httpx.get(f"{stdlib_url}/does-not-exist").status_code == 404
    assert httpx.delete(f"{stdlib_url}/api/products").status_code == 404


def test_fastapi_full_listings(client):
    assert client.get("/api/users").json() == USERS
    assert client.get("/api/products").json() == PRODUCTS


@pytest.mark.parametrize("path,status", [("/api/users", 200), ("/api/%75sers", 404), ("/api/users%2F", 404)])
def test_percent_encoded_path_matches_the_same_on_both_hosts(client, stdlib_url, path, status):
    assert client.get(path).status_code == status
    assert httpx.get(f"{stdlib_url}{path}").status_code == status


def test_encoded_path_with_query_string(client):
    assert client.get("/api/%75sers?x=1").status_code == 404
    assert client.get("/api/users?x=%75").status_code == 200


def test_main_module_builds_nothing_at_import():
    from static_responder import main

    assert not hasattr(main, "app")
    assert TestClient(main.create_default_app()).get("/").status_code == 201
