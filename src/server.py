import os
import logging
import sys
import uvicorn
from educms_backend.settings import settings

LOG_FORMAT = '%(asctime)s - %(levelname)-8s - %(name)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Colors the level name when writing to a terminal."""

    COLORS = {
        logging.DEBUG: "\x1b[38;21m",
        logging.INFO: "\x1b[32m",
        logging.WARNING: "\x1b[33m",
        logging.ERROR: "\x1b[31m",
        logging.CRITICAL: "\x1b[31;1m",
    }
    RESET = "\x1b[0m"

    def formatMessage(self, record):
        if not sys.stdout.isatty():
            return super().formatMessage(record)
        original = record.levelname
        record.levelname = f"{self.COLORS.get(record.levelno, '')}{original}{self.RESET}"
        try:
            return super().formatMessage(record)
        finally:
            record.levelname = original


def setup_logging(level: str = "INFO"):
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    # Table operations are logged at INFO by the backend modules
    logging.getLogger("educms_backend").setLevel(getattr(logging, level, logging.INFO))


def uvicorn_log_config(log_level: str) -> dict:
    level = log_level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "colored": {"()": ColoredFormatter, "fmt": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": {
            "default": {"class": "logging.StreamHandler", "formatter": "colored", "stream": "ext://sys.stdout"},
        },
        "loggers": {
            name: {"handlers": ["default"], "level": level, "propagate": False}
            for name in ("uvicorn", "uvicorn.error", "uvicorn.access")
        },
    }


def main():
    uvicorn_log_level = os.environ.get("UVICORN_LOG_LEVEL", "info").lower()
    setup_logging(uvicorn_log_level.upper())

    print(f"Server running on http://localhost:{settings.PORT}")

    uvicorn.run(
        "educms_backend.server:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=uvicorn_log_config(uvicorn_log_level),
        reload=settings.DEBUG_MODE != "production",
        workers=1
    )


if __name__ == "__main__":
    main()
