import argparse
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Optional, Sequence

from .config import ConfigError, Settings, load_settings, parse_port
from .dispatcher import dispatch, parse_request
from .models import Message
from .responses import json_reply, write_reply

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

# Error ids carried in the body, matching the route handlers.
ERROR_IDS = {400: "badRequest", 404: "notFound"}
NO_BODY_CODES = (204, 205, 304)


class StatusHandler(BaseHTTPRequestHandler):
    server_version = f"StatusDemo/{VERSION}"

    def _discard_body(self) -> None:
        try:
            length = int(self.headers.get("Content-Length") or 0)
        except ValueError:
            length = 0
        if length > 0:
            self.rfile.read(length)

    def _handle(self, include_body: bool = True) -> None:
        self._discard_body()
        request = parse_request(self.command, self.path, dict(self.headers.items()))
        reply = dispatch(request)
        try:
            write_reply(self, reply, include_body=include_body)
        except (BrokenPipeError, ConnectionResetError):
            # client went away mid-response; nothing left to send to
            logger.debug("client disconnected before %s %s was sent", self.command, self.path)

    # Every method goes through the route table, as GET does.
    def do_GET(self) -> None:  # noqa: N802 - http.server API uses camelcase
        self._handle()

    do_POST = do_PUT = do_PATCH = do_DELETE = do_OPTIONS = do_GET

    def do_HEAD(self) -> None:  # noqa: N802
        self._handle(include_body=False)

    def send_error(self, code: int, message: Optional[str] = None, explain: Optional[str] = None) -> None:
        """Answer stdlib-level failures (bad request line, unknown method) with JSON."""
        if not self.command:
            # request line never parsed; still reply with a status line
            self.request_version = self.protocol_version
        shortmsg = self.responses.get(code, ("Error",))[0]
        message = message or shortmsg
        self.log_error("code %d, message %s", code, message)
        self.close_connection = True
        reply = json_reply(code, Message(message=message, id=ERROR_IDS.get(code)))
        include_body = self.command != "HEAD" and code >= 200 and code not in NO_BODY_CODES
        write_reply(self, reply, include_body=include_body)

    def log_message(self, format: str, *args) -> None:  # noqa: A002 - keep default signature
        client = f"{self.client_address[0]}:{self.client_address[1]}"
        logger.info("%s - %s", client, format % args)


def make_server(host: str, port: int) -> ThreadingHTTPServer:
    httpd = ThreadingHTTPServer((host, port), StatusHandler)
    httpd.daemon_threads = True
    return httpd


def run(settings: Optional[Settings] = None) -> None:
    settings = settings or load_settings()
    httpd = make_server(settings.host, settings.port)
    host, port = httpd.server_address[:2]
    logger.info("Listening on %s:%s", host, port)
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down")
    finally:
        httpd.server_close()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="statusdemo", description="HTTP status code demo server")
    parser.add_argument("--host", help="Bind address (default: $HOST or 0.0.0.0)")
    parser.add_argument("--port", help="Port (default: $PORT, $NODE_PORT or 3000)")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        if args.port is not None:
            settings = Settings(host=settings.host, port=parse_port(args.port))
    except ConfigError as exc:
        parser.error(str(exc))
    if args.host:
        settings = Settings(host=args.host, port=settings.port)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run(settings)


if __name__ == "__main__":
    main()
