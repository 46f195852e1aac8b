from __future__ import annotations

import datetime

from aiohttp import web
from loguru import logger

from santa.services.errors import AssignmentError

INTERNAL_ERROR_MESSAGE = "Unexpected error occurred"


def error_response(status: int, code: str, message: str) -> web.Response:
    body = {
        "code": code,
        "message": message,
        "timestamp": datetime.datetime.now(tz=datetime.timezone.utc).isoformat(),
    }
    return web.json_response(body, status=status)


@web.middleware
async def error_middleware(request: web.Request, handler) -> web.StreamResponse:
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except AssignmentError as exc:
        logger.bind(path=request.path, code=exc.code).warning("Request rejected: {error}", error=str(exc))
        return error_response(400, exc.code, str(exc))
    except Exception as exc:
        logger.bind(path=request.path).exception("Unhandled error: {error}", error=str(exc))
        return error_response(500, "INTERNAL_ERROR", INTERNAL_ERROR_MESSAGE)
