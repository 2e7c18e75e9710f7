from fastapi import FastAPI, Request, Response

from .dispatcher import METHODS, dispatch, parse_request
from .server import VERSION

# Docs routes are disabled so every path goes through the dispatcher.
app = FastAPI(
    title="Status Code Demo",
    version=VERSION,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


def request_target(request: Request) -> str:
    """Rebuild the raw request target (undecoded path plus query string)."""
    raw_path = request.scope.get("raw_path")
    # some servers leave the query string on raw_path
    path = raw_path.decode("latin-1").split("?", 1)[0] if raw_path else request.url.path
    query = request.url.query
    return f"{path}?{query}" if query else path


@app.api_route("/{path:path}", methods=list(METHODS), include_in_schema=False)
def handle(request: Request) -> Response:
    reply = dispatch(parse_request(request.method, request_target(request), request.headers))
    # explicit header so Starlette keeps the content type exactly as given
    return Response(content=reply.body, status_code=reply.status, headers={"Content-Type": reply.content_type})
