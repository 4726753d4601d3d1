"""Demo route table: a greeting page plus two read-only JSON listings."""
from __future__ import annotations

import json

from .models import BodyKind, RouteRule
from .schemas import Greeting, Product, User
from .table import RouteTable

GREETING_TEXT = "Hello, World!"

USERS = [
    User(id=1, username="anson", displayname="Anson"),
    User(id=2, username="john", displayname="John"),
    User(id=3, username="adam", displayname="Adam"),
]

PRODUCTS = [
    Product(id=1, name="Laptop", price=999.99),
    Product(id=2, name="Smartphone", price=499.99),
    Product(id=3, name="Headphones", price=199.99),
]


def greeting_page(text: str = GREETING_TEXT) -> str:
    payload = json.dumps(Greeting(msg=text).model_dump(), indent=2)
    return f"\n<div>{text}</div>\n<pre>{payload}</pre>\n"


def build_route_table() -> RouteTable:
    table = RouteTable()
    table.add(
        RouteRule(
            method="GET",
            path="/",
            status=201,
            body_kind=BodyKind.HTML,
            body=greeting_page(),
        )
    )
    table.add(
        RouteRule(
            method="GET",
            path="/api/users",
            body_kind=BodyKind.JSON,
            body=[u.model_dump() for u in USERS],
        )
    )
    table.add(
        RouteRule(
            method="GET",
            path="/api/products",
            body_kind=BodyKind.JSON,
            body=[p.model_dump() for p in PRODUCTS],
        )
    )
    return table
