from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from .models import Request, Response, RouteRule

logger = logging.getLogger(__name__)

RouteKey = Tuple[str, str]


class DuplicateRouteError(ValueError):
    """Raised when two rules target the same (method, path)."""

    def __init__(self, method: str, path: str) -> None:
        super().__init__(f"route already registered: {method} {path}")
        self.method = method
        self.path = path


class RouteTable:
    """Fixed table of literal (method, path) routes.

    Rules are registered once during setup; afterwards the table is only
    read, so ``handle`` can be called from any number of threads.
    """

    def __init__(self) -> None:
        self._rules: Dict[RouteKey, RouteRule] = {}

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    # === Setup ===
    def register(self, method: str, path: str, rule: RouteRule) -> None:
        key = (method, path)
        if key in self._rules:
            raise DuplicateRouteError(method, path)
        self._rules[key] = rule
        logger.debug("Registered route %s %s -> %s", method, path, rule.status)

    def add(self, rule: RouteRule) -> None:
        self.register(rule.method, rule.path, rule)

    def routes(self) -> Mapping[RouteKey, RouteRule]:
        return MappingProxyType(self._rules)

    # === Dispatch ===
    def handle(self, request: Request) -> Response:
        rule = self._rules.get((request.method, request.path))
        if rule is None:
            return Response.not_found()
        return Response.from_rule(rule)
