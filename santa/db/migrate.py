from __future__ import annotations

from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from loguru import logger

SCRIPT_LOCATION = Path(__file__).resolve().parents[2] / "alembic"


def alembic_config(database_url: str, script_location: Optional[Path] = None) -> Config:
    config = Config()
    config.set_main_option("script_location", str(script_location or SCRIPT_LOCATION))
    # configparser treats "%" as interpolation, e.g. in url-encoded passwords
    config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return config


def upgrade_schema(database_url: str, revision: str = "head") -> None:
    logger.bind(revision=revision).info("Applying database migrations")
    command.upgrade(alembic_config(database_url), revision)
