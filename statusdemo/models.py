from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel


def _empty() -> Mapping[str, str]:
    return MappingProxyType({})


# === Request and reply objects, one of each per request ===


@dataclass(frozen=True)
class Request:
    method: str
    path: str
    query: Mapping[str, str] = field(default_factory=_empty)
    headers: Mapping[str, str] = field(default_factory=_empty)


@dataclass(frozen=True)
class Reply:
    status: int
    content_type: str
    body: bytes


# === Wire payload ===


class Message(BaseModel):
    message: str
    id: Optional[str] = None  # error id, only set on 400/404
