from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_CIVIL_TIMEZONE, DEFAULT_LONG_SESSION_LOG_MINUTES, DEFAULT_WEEK_START

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_container() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    db_config = getattr(settings, "DB_CONFIG")
    civil_timezone = getattr(settings, "CIVIL_TIMEZONE", DEFAULT_CIVIL_TIMEZONE)

    if getattr(settings, "DEBUG", False):
        logger.debug(
            "settings=%s db=%s@%s:%s/%s tz=%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
            civil_timezone,
        )

    return build_container(
        db_config=db_config,
        civil_timezone=civil_timezone,
        long_session_log_minutes=int(getattr(settings, "LONG_SESSION_LOG_MINUTES", DEFAULT_LONG_SESSION_LOG_MINUTES)),
        week_start=int(getattr(settings, "WEEK_START", DEFAULT_WEEK_START)),
    )
