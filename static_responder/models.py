from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from typing import Any, Optional


class BodyKind(str, enum.Enum):
    """Payload encoding of a rule's body."""

    TEXT = "text"
    HTML = "html"
    JSON = "json"

    @property
    def media_type(self) -> str:
        return _MEDIA_TYPES[self]


_MEDIA_TYPES = {
    BodyKind.TEXT: "text/plain",
    BodyKind.HTML: "text/html",
    BodyKind.JSON: "application/json",
}


# === Domain objects used by the route table ===


@dataclass(frozen=True)
class RouteRule:
    method: str
    path: str
    body_kind: BodyKind
    body: Any
    status: int = 200
    json_indent: Optional[int] = None  # json only; None means compact


@dataclass(frozen=True)
class Request:
    method: str
    path: str


@dataclass(frozen=True)
class Response:
    status: int
    body_kind: BodyKind
    body: Any
    json_indent: Optional[int] = None

    @classmethod
    def from_rule(cls, rule: RouteRule) -> Response:
        return cls(
            status=rule.status,
            body_kind=rule.body_kind,
            body=rule.body,
            json_indent=rule.json_indent,
        )

    @classmethod
    def not_found(cls) -> Response:
        return cls(status=404, body_kind=BodyKind.TEXT, body="")

    @property
    def media_type(self) -> str:
        return self.body_kind.media_type

    def encode(self) -> bytes:
        return encode_body(self.body_kind, self.body, self.json_indent)


def encode_body(kind: BodyKind, body: Any, json_indent: Optional[int] = None) -> bytes:
    """Serialize a body for the wire according to its kind.

    Text and HTML bodies are sent byte-for-byte as UTF-8. JSON bodies are
    dumped deterministically: pretty-printed when ``json_indent`` is given,
    otherwise with compact separators.
    """
    if kind is BodyKind.JSON:
        if json_indent is not None:
            text = json.dumps(body, indent=json_indent, ensure_ascii=False)
        else:
            text = json.dumps(body, separators=(",", ":"), ensure_ascii=False)
        return text.encode("utf-8")
    if isinstance(body, bytes):
        return body
    return str(body).encode("utf-8")
