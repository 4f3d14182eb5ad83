import logging
import sys
from typing import Literal

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PASSGEN_")

    debounce_seconds: float = 0.2
    scorer: Literal["zxcvbn", "entropy"] = "zxcvbn"
    log_level: str = "WARNING"


config = Config()


class InterceptHandler(logging.Handler):
    def emit(self, record):
        # Get corresponding Loguru level
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller to get correct stack depth
        frame, depth = logging.currentframe(), 2
        while frame.f_back and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(level: str | None = None) -> None:
    """Send loguru and stdlib logging output to stderr at *level*."""
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logging.getLogger("asyncio").setLevel(logging.INFO)

    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or config.log_level).upper(),
        backtrace=True,
        diagnose=False,
    )
