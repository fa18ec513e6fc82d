"""
WSGI usage example of fastapi-request-context.

Demonstrates:
- Adapting a WSGI environ with EnvironTransport
- Body sniffing of JSON, XML and plain text payloads
- Carrying a response status with StatusHolder
"""

import json
from wsgiref.simple_server import make_server

from fastapi_request_context import (
    EnvironTransport,
    RequestContext,
    Status,
    StatusHolder,
)


class EchoHandler:
    def __init__(self, ctx: RequestContext) -> None:
        self.ctx = ctx
        self.status_holder = StatusHolder()

    def handle(self) -> dict:
        if not self.ctx.method_allowed:
            self.status_holder.status = Status(405)
            return {"error": "method not allowed"}
        return {
            "chain": list(self.ctx.request_chain),
            "format": self.ctx.format,
            "body": self.ctx.body,
            "request": self.ctx.to_dict(),
        }


def app(environ, start_response):
    ctx = RequestContext(transport=EnvironTransport(environ))
    handler = EchoHandler(ctx)
    payload = json.dumps(handler.handle(), default=str).encode()
    start_response(
        str(handler.status_holder.status),
        [("Content-Type", "application/json"), ("Content-Length", str(len(payload)))],
    )
    return [payload]


if __name__ == "__main__":
    with make_server("", 8000, app) as server:
        server.serve_forever()

    # Test with:
    # curl -d '{"a": 1}' http://localhost:8000/things/1.json
    # curl -d '<thing><a>1</a></thing>' http://localhost:8000/things
    # curl -d 'just text' http://localhost:8000/notes?x=1
