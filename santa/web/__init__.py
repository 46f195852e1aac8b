from aiohttp import web

from santa.services.secret_santa import SecretSantaService
from santa.web.handlers import SERVICE_KEY, routes
from santa.web.middleware import error_middleware


def create_app(service: SecretSantaService) -> web.Application:
    app = web.Application(middlewares=[error_middleware])
    app[SERVICE_KEY] = service
    app.add_routes(routes)
    return app


__all__ = ["create_app"]
