"""Library configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "info"

    # Decimal places written into SVG path data
    svg_precision: int = 3

    model_config = {
        "env_prefix": "SPEECHBUBBLE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at the configured level. Library code only logs."""
    name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
