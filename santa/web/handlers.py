from __future__ import annotations

from aiohttp import web
from loguru import logger

from santa.services.secret_santa import SecretSantaService
from santa.web.middleware import error_response

API_PREFIX = "/api/v1/secret-santa"
DEFAULT_API_VERSION = "1"

SERVICE_KEY = web.AppKey("secret_santa_service", SecretSantaService)

routes = web.RouteTableDef()


@routes.get(API_PREFIX + "/assignments/{year}")
@routes.post(API_PREFIX + "/assignments/{year}")
async def assignments_handler(request: web.Request) -> web.Response:
    raw_year = request.match_info["year"]
    try:
        year = int(raw_year)
    except ValueError:
        return error_response(400, "INVALID_REQUEST", f"Year must be an integer, got {raw_year!r}")

    api_version = request.headers.get("API-Version", DEFAULT_API_VERSION)
    log = logger.bind(year=year, api_version=api_version)
    log.info("Creating Secret Santa assignments")

    service = request.app[SERVICE_KEY]
    assignments = await service.create_assignments(year)

    log.info("Completed assignments for year {year}", year=year)
    return web.json_response([assignment.to_dict() for assignment in assignments])
