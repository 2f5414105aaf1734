"""Library configuration from environment variables."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    polyimg_log_level: str = "info"

    # Upper bound on nodes produced while materializing <use> references
    polyimg_max_nodes: int = 100_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


def configure_logging(level: str | None = None, env_file: str | None = ".env") -> None:
    """Application entry point setup: load env_file into the environment, then
    apply the log format and level to the root logger.

    The library never calls this itself; importing polyimg leaves os.environ alone.
    """
    if env_file:
        load_dotenv(env_file)
    level_name = (level or Settings().polyimg_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
