from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Callable, Mapping, Optional
from urllib.parse import parse_qsl, urlsplit

from . import handlers
from .models import Reply, Request
from .routes import ROUTE_TABLE, Route

logger = logging.getLogger(__name__)

Handler = Callable[[Request], Reply]

# Methods both transports route through the table.
METHODS = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")

HANDLERS: Mapping[Route, Handler] = MappingProxyType(
    {
        Route.INDEX: handlers.index,
        Route.SUCCESS: handlers.success,
        Route.BAD_REQUEST: handlers.bad_request,
        Route.NOT_FOUND: handlers.not_found,
    }
)

_missing = set(Route) - set(HANDLERS)
if _missing:
    raise RuntimeError(f"routes without a handler: {sorted(r.name for r in _missing)}")


def parse_request(method: str, target: str, headers: Optional[Mapping[str, str]] = None) -> Request:
    """Split a request target into path and query mapping.

    The path is kept exactly as sent (no decoding, no case folding, no
    trailing-slash stripping). Repeated query keys keep the last value.
    """
    parts = urlsplit(target)
    query = dict(parse_qsl(parts.query, keep_blank_values=True))
    return Request(
        method=method.upper(),
        path=parts.path,
        query=MappingProxyType(query),
        headers=MappingProxyType(dict(headers or {})),
    )


def resolve(path: str) -> Route:
    return ROUTE_TABLE.get(path, Route.NOT_FOUND)


def dispatch(request: Request) -> Reply:
    route = resolve(request.path)
    reply = HANDLERS[route](request)
    logger.debug("dispatch %s %s -> %s (%d)", request.method, request.path, route.value, reply.status)
    return reply
