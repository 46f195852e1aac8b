from __future__ import annotations

import asyncio

import uvloop
from aiohttp import web
from loguru import logger

from santa.core.config import Settings, load_settings
from santa.core.logging import setup_logging
from santa.db import init_engine, upgrade_schema
from santa.db.store import SqlAssignmentStore
from santa.services.assignment import HamiltonianCycleStrategy
from santa.services.secret_santa import SecretSantaService
from santa.web import create_app


async def on_startup(app: web.Application) -> None:
    logger.info("server started")


async def on_shutdown(app: web.Application) -> None:
    logger.info("server stopping...")


def build_app(settings: Settings) -> web.Application:
    upgrade_schema(settings.database_url)
    init_engine(settings.database_url)

    strategy = HamiltonianCycleStrategy(rule=settings.immediate_family_rule)
    service = SecretSantaService(SqlAssignmentStore(), strategy)

    app = create_app(service)
    app.on_startup.append(on_startup)
    app.on_shutdown.append(on_shutdown)

    logger.info("Immediate family rule - {rule}", rule=settings.immediate_family_rule.value)
    return app


def main() -> None:
    settings = load_settings()
    setup_logging(settings.log_level, settings.log_path)

    logger.info("server starting...")
    web.run_app(build_app(settings), host=settings.host, port=settings.port, print=None)


if __name__ == "__main__":
    if not getattr(asyncio, "debug", False):
        uvloop.install()

    main()
