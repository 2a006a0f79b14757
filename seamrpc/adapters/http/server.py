"""
HTTP server adapter

Serves a seamrpc Server on one POST route of a Starlette application.
Notifications are answered with 204 and no body; an unreadable body is a
plain-text 400, not a JSON-RPC error.
"""

import logging

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from starlette.routing import Route

from seamrpc.adapters.adapter_interface import StaticBodyReader
from seamrpc.errors import ServerError

logger = logging.getLogger(__name__)


def create_http_app(server, path: str = "/rpc") -> Starlette:
    """Build a Starlette app dispatching POST bodies on ``path`` to ``server``"""

    async def endpoint(request: Request) -> Response:
        body = await request.body()
        try:
            reply = await run_in_threadpool(server.process, StaticBodyReader(body))
        except ServerError as e:
            return PlainTextResponse(str(e), status_code=400)

        if reply.body is None:
            return Response(status_code=204, headers=reply.headers)
        return Response(content=reply.body, status_code=200, headers=reply.headers)

    logger.info(f"JSON-RPC endpoint mounted at {path}")
    return Starlette(routes=[Route(path, endpoint, methods=["POST"])])
