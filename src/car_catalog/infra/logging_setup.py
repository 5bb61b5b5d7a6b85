import logging
import sys

from car_catalog.infra.config import log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attributes every LogRecord has; anything else came in through ``extra=``
_STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
}


class ContextFormatter(logging.Formatter):
    """Formats the message, then appends ``extra=`` fields as ``key=value``."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(record)
        context = {
            key: value for key, value in vars(record).items() if key not in _STANDARD_ATTRS
        }
        if not context:
            return line
        pairs = " ".join(f"{key}={value!r}" for key, value in sorted(context.items()))
        return f"{line} [{pairs}]"


def setup_logging(level: str | None = None) -> None:
    """
    Configure one stderr handler on the root logger.

    ``level`` defaults to LOG_LEVEL; unknown names fall back to INFO.
    """
    level_value = getattr(logging, (level or log_level()).upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ContextFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logging.basicConfig(level=level_value, handlers=[handler])
