import os
from dataclasses import dataclass
from dotenv import load_dotenv

from santa.services.graph import ImmediateFamilyRule

load_dotenv()


@dataclass(frozen=True)
class Settings:
    database_url: str
    log_level: str
    log_path: str
    host: str
    port: int
    immediate_family_rule: ImmediateFamilyRule


def load_settings() -> Settings:
    database_url = os.getenv("DATABASE_URL")
    log_level = os.getenv("LOG_LEVEL", "INFO")
    log_path = os.getenv("LOG_PATH", "logs/secret_santa.log")
    host = os.getenv("HOST", "0.0.0.0")
    port = os.getenv("PORT", "8080")
    rule = os.getenv("IMMEDIATE_FAMILY_RULE", ImmediateFamilyRule.ANY_EDGE.value)

    if not database_url:
        raise ValueError("DATABASE_URL is required. Set it in the environment or .env file.")
    if not port.isdigit():
        raise ValueError(f"PORT must be an integer, got {port!r}.")
    try:
        immediate_family_rule = ImmediateFamilyRule(rule.lower())
    except ValueError as exc:
        allowed = ", ".join(item.value for item in ImmediateFamilyRule)
        raise ValueError(f"IMMEDIATE_FAMILY_RULE must be one of: {allowed}.") from exc

    return Settings(
        database_url=database_url,
        log_level=log_level,
        log_path=log_path,
        host=host,
        port=int(port),
        immediate_family_rule=immediate_family_rule,
    )
