import pytest

from statusdemo.dispatcher import HANDLERS, dispatch, parse_request, resolve
from statusdemo.routes import ROUTE_TABLE, Route


def test_every_route_has_a_handler():
    assert set(HANDLERS) == set(Route)


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        ROUTE_TABLE["/other"] = Route.SUCCESS
    with pytest.raises(TypeError):
        HANDLERS[Route.SUCCESS] = HANDLERS[Route.NOT_FOUND]


def test_parse_request_splits_path_and_query():
    request = parse_request("get", "/badRequest?valid=true&x=1")
    assert request.method == "GET"
    assert request.path == "/badRequest"
    assert dict(request.query) == {"valid": "true", "x": "1"}


def test_parse_request_last_value_wins():
    request = parse_request("GET", "/badRequest?valid=true&valid=no")
    assert request.query["valid"] == "no"


def test_parse_request_keeps_blank_values():
    request = parse_request("GET", "/badRequest?valid=")
    assert dict(request.query) == {"valid": ""}


def test_parse_request_decodes_query_but_not_path():
    request = parse_request("GET", "/%73uccess?name=caf%C3%A9+bar")
    assert request.path == "/%73uccess"
    assert request.query["name"] == "café bar"


def test_parse_request_absolute_form():
    request = parse_request("GET", "http://localhost:3000/success?a=b")
    assert request.path == "/success"
    assert dict(request.query) == {"a": "b"}


def test_parse_request_tolerates_malformed_query():
    request = parse_request("GET", "/badRequest?&&=&valid&%zz=1")
    assert request.path == "/badRequest"
    assert request.query.get("valid") == ""


@pytest.mark.parametrize(
    "path, route",
    [
        ("/", Route.INDEX),
        ("/success", Route.SUCCESS),
        ("/badRequest", Route.BAD_REQUEST),
        ("/Success", Route.NOT_FOUND),
        ("/success/", Route.NOT_FOUND),
        ("/successful", Route.NOT_FOUND),
        ("/badrequest", Route.NOT_FOUND),
        ("", Route.NOT_FOUND),
        ("notFound", Route.NOT_FOUND),
    ],
)
def test_resolve_is_exact(path, route):
    assert resolve(path) is route


def test_dispatch_unknown_path_is_not_found():
    reply = dispatch(parse_request("GET", "/does/not/exist"))
    assert reply.status == 404


def test_dispatch_runs_a_single_handler(monkeypatch):
    import statusdemo.dispatcher as dispatcher_module

    calls = []

    def recording(route, handler):
        def wrapped(request):
            calls.append(route)
            return handler(request)

        return wrapped

    monkeypatch.setattr(
        dispatcher_module,
        "HANDLERS",
        {route: recording(route, handler) for route, handler in HANDLERS.items()},
    )
    dispatch(parse_request("GET", "/badRequest?valid=true"))
    dispatch(parse_request("GET", "/nowhere"))
    assert calls == [Route.BAD_REQUEST, Route.NOT_FOUND]
