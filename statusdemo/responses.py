"""Response writer: turns payloads into encoded replies and sends them.

A reply is written exactly once per request. ``write_reply`` does not guard
against a second call on the same sink.
"""
from __future__ import annotations

import json
from typing import Any, Mapping, Protocol, Union

from .models import Message, Reply

JSON_CONTENT_TYPE = "application/json"
HTML_CONTENT_TYPE = "text/html; charset=utf-8"


class ResponseSink(Protocol):
    """The subset of ``BaseHTTPRequestHandler`` the writer needs."""

    wfile: Any

    def send_response(self, code: int, message: str | None = None) -> None: ...

    def send_header(self, keyword: str, value: str) -> None: ...

    def end_headers(self) -> None: ...


def encode_json(payload: Union[Message, Mapping[str, Any]]) -> bytes:
    if isinstance(payload, Message):
        payload = payload.model_dump(exclude_none=True)
    text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    return text.encode("utf-8")


def json_reply(status: int, payload: Union[Message, Mapping[str, Any]]) -> Reply:
    return Reply(status=status, content_type=JSON_CONTENT_TYPE, body=encode_json(payload))


def html_reply(status: int, text: str) -> Reply:
    return Reply(status=status, content_type=HTML_CONTENT_TYPE, body=text.encode("utf-8"))


def write_reply(sink: ResponseSink, reply: Reply, include_body: bool = True) -> None:
    sink.send_response(reply.status)
    sink.send_header("Content-Type", reply.content_type)
    # byte length, so multi-byte payloads are framed correctly
    sink.send_header("Content-Length", str(len(reply.body)))
    sink.end_headers()
    if include_body:
        sink.wfile.write(reply.body)


def respond_json(sink: ResponseSink, status: int, payload: Union[Message, Mapping[str, Any]]) -> None:
    write_reply(sink, json_reply(status, payload))
