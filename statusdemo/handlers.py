"""Route handlers.

Each handler takes a parsed ``Request`` and returns the ``Reply`` for it.
They do no I/O; the transport writes whatever they return.
"""
from pathlib import Path

from .models import Message, Reply, Request
from .responses import html_reply, json_reply

CLIENT_PAGE = Path(__file__).parent / "client" / "client.html"

SUCCESS_MESSAGE = "This is a successful response."
VALID_MESSAGE = "This request has the required parameters"
MISSING_VALID_MESSAGE = "Missing valid query parameter set to true"
NOT_FOUND_MESSAGE = "The page you are looking for was not found."

# Read once at import; the page never changes while the process runs.
_index_html = CLIENT_PAGE.read_text(encoding="utf-8")


def index(request: Request) -> Reply:
    return html_reply(200, _index_html)


def success(request: Request) -> Reply:
    return json_reply(200, Message(message=SUCCESS_MESSAGE))


def bad_request(request: Request) -> Reply:
    # Only the exact string "true" passes; "TRUE", "1" and "" do not.
    if request.query.get("valid") != "true":
        return json_reply(400, Message(message=MISSING_VALID_MESSAGE, id="badRequest"))
    return json_reply(200, Message(message=VALID_MESSAGE))


def not_found(request: Request) -> Reply:
    return json_reply(404, Message(message=NOT_FOUND_MESSAGE, id="notFound"))
