from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Route(Enum):
    INDEX = "index"
    SUCCESS = "success"
    BAD_REQUEST = "badRequest"
    NOT_FOUND = "notFound"


# Exact path -> route. NOT_FOUND is the fallback and has no path of its own.
ROUTE_TABLE: Mapping[str, Route] = MappingProxyType(
    {
        "/": Route.INDEX,
        "/success": Route.SUCCESS,
        "/badRequest": Route.BAD_REQUEST,
    }
)
