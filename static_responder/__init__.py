from .models import BodyKind, Request, Response, RouteRule
from .table import DuplicateRouteError, RouteTable

__all__ = [
    "BodyKind",
    "DuplicateRouteError",
    "Request",
    "Response",
    "RouteRule",
    "RouteTable",
]
